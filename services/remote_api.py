# taskboard/services/remote_api.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from core.errors import RemoteApiError
from core.logs import get_logger
from core.settings import REMOTE
from helpers.datetime_utils import parse_iso, to_iso
from models.category import Category
from models.task import Task

# server rows come back snake_case from the database, camelCase from POST echoes
_TASK_KEYS = {
    "categoryId": "category_id",
    "reminderDate": "reminder_date",
    "dueDate": "due_date",
    "createdAt": "created_at",
    "isStarred": "is_starred",
}
_DATE_FIELDS = ("reminder_date", "due_date", "created_at")
_OUTGOING = {
    "title": "title",
    "completed": "completed",
    "category_id": "categoryId",
    "reminder_date": "reminderDate",
    "due_date": "dueDate",
}


def task_from_remote(row: Dict[str, Any]) -> Task:
    data: Dict[str, Any] = {}
    for key, value in row.items():
        data[_TASK_KEYS.get(key, key)] = value
    for name in _DATE_FIELDS:
        value = data.get(name)
        if isinstance(value, str):
            data[name] = parse_iso(value)
    if data.get("created_at") is None:
        data.pop("created_at", None)
    data["completed"] = bool(data.get("completed"))
    data["is_starred"] = bool(data.get("is_starred"))
    data["id"] = str(data["id"])
    if data.get("category_id") is not None:
        data["category_id"] = str(data["category_id"])
    fields = Task.model_fields.keys()
    return Task.model_validate({k: v for k, v in data.items() if k in fields})


def category_from_remote(row: Dict[str, Any]) -> Category:
    return Category(id=str(row["id"]), name=row.get("name") or "", color=row.get("color") or "#4299E1")


def task_to_remote(fields: Dict[str, Any]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for key, value in fields.items():
        remote_key = _OUTGOING.get(key)
        if remote_key is None:
            continue
        payload[remote_key] = to_iso(value) if isinstance(value, datetime) else value
    return payload


class RemoteApiClient:
    """Thin wrapper over the Taskboard REST API with bearer-token auth."""

    def __init__(
        self,
        base_url: str = REMOTE.base_url,
        *,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = REMOTE.timeout_sec,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.user_id: Optional[str] = None
        self.session = session or requests.Session()
        self.timeout = timeout
        self._log = get_logger("remote")

    # ----- transport -----
    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> Any:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(
                method, url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            self._log.warning("%s %s failed: %s", method, path, exc)
            raise RemoteApiError(str(exc)) from exc

        if resp.status_code >= 400:
            message = resp.reason or "Request failed"
            try:
                body = resp.json()
                if isinstance(body, dict) and body.get("error"):
                    message = str(body["error"])
            except ValueError:
                pass
            self._log.warning("%s %s -> %s %s", method, path, resp.status_code, message)
            raise RemoteApiError(message, status=resp.status_code)

        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return None

    # ----- auth -----
    def _authenticate(self, path: str, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", path, {"email": email, "password": password}) or {}
        token = data.get("token")
        if not token:
            raise RemoteApiError("Server did not return a token")
        self.token = token
        self.user_id = data.get("userId")
        return data

    def register(self, email: str, password: str) -> Dict[str, Any]:
        return self._authenticate("/register", email, password)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._authenticate("/login", email, password)

    def logout(self) -> None:
        self.token = None
        self.user_id = None

    # ----- categories -----
    def list_categories(self) -> List[Category]:
        rows = self._request("GET", "/categories") or []
        return [category_from_remote(row) for row in rows]

    def create_category(self, name: str, color: str) -> Category:
        row = self._request("POST", "/categories", {"name": name, "color": color}) or {}
        return category_from_remote({"name": name, "color": color, **row})

    def delete_category(self, category_id: str) -> None:
        self._request("DELETE", f"/categories/{category_id}")

    # ----- tasks -----
    def list_tasks(self) -> List[Task]:
        rows = self._request("GET", "/tasks") or []
        return [task_from_remote(row) for row in rows]

    def create_task(self, task: Task) -> str:
        payload = task_to_remote(task.model_dump())
        row = self._request("POST", "/tasks", payload) or {}
        return str(row.get("id") or task.id)

    def update_task(self, task_id: str, fields: Dict[str, Any]) -> None:
        payload = task_to_remote(fields)
        if not payload:
            return
        self._request("PATCH", f"/tasks/{task_id}", payload)

    def delete_task(self, task_id: str) -> None:
        self._request("DELETE", f"/tasks/{task_id}")


__all__ = [
    "RemoteApiClient",
    "category_from_remote",
    "task_from_remote",
    "task_to_remote",
]
