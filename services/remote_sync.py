"""Mirror local mutations onto the remote API, one call per change."""
from __future__ import annotations

from typing import Callable, Dict, Optional

from core.errors import RemoteApiError
from core.logs import get_logger
from services.board import TaskBoard
from services.events import (
    ALL,
    CATEGORY_CREATED,
    CATEGORY_DELETED,
    TASK_CREATED,
    TASK_DELETED,
    TASK_UPDATED,
    Change,
    ChangeEvents,
)
from services.remote_api import RemoteApiClient

Notifier = Callable[[str], None]


class RemoteMirror:
    """Keeps the server in step with the in-memory board.

    The server assigns its own ids on create, so local ids are mapped to
    remote ones for later PATCH/DELETE calls. Failures are logged and passed
    to ``on_error``; the local board is never rolled back.
    """

    def __init__(
        self,
        client: RemoteApiClient,
        board: TaskBoard,
        events: ChangeEvents,
        *,
        on_error: Optional[Notifier] = None,
    ):
        self.client = client
        self.board = board
        self.events = events
        self.on_error = on_error
        self.task_ids: Dict[str, str] = {}
        self.category_ids: Dict[str, str] = {}
        self._log = get_logger("remote.sync")
        self._handlers = {
            TASK_CREATED: self._on_task_created,
            TASK_UPDATED: self._on_task_updated,
            TASK_DELETED: self._on_task_deleted,
            CATEGORY_CREATED: self._on_category_created,
            CATEGORY_DELETED: self._on_category_deleted,
        }

    def attach(self) -> None:
        self.events.subscribe(ALL, self.handle)

    def detach(self) -> None:
        self.events.unsubscribe(ALL, self.handle)

    def pull(self) -> bool:
        """Replace the board with the server's state. Returns ``False`` on failure."""

        try:
            categories = self.client.list_categories()
            tasks = self.client.list_tasks()
        except RemoteApiError as exc:
            self._report("load", exc)
            return False
        self.board.replace(tasks, categories)
        self.task_ids = {t.id: t.id for t in tasks}
        self.category_ids = {c.id: c.id for c in categories}
        self._log.info("pulled %d tasks, %d categories", len(tasks), len(categories))
        return True

    def handle(self, change: Change) -> None:
        handler = self._handlers.get(change.event)
        if handler is None:
            return
        try:
            handler(change)
        except RemoteApiError as exc:
            self._report(change.event, exc)

    # ------------------------------------------------------------------
    def _remote_category(self, category_id: Optional[str]) -> Optional[str]:
        if category_id is None:
            return None
        return self.category_ids.get(category_id, category_id)

    def _outgoing(self, fields: dict) -> dict:
        if "category_id" in fields:
            fields = {**fields, "category_id": self._remote_category(fields["category_id"])}
        return fields

    def _on_task_created(self, change: Change) -> None:
        task = change.item
        payload = task.model_copy(update={"category_id": self._remote_category(task.category_id)})
        self.task_ids[task.id] = self.client.create_task(payload)

    def _on_task_updated(self, change: Change) -> None:
        remote_id = self.task_ids.get(change.item_id, change.item_id)
        self.client.update_task(remote_id, self._outgoing(change.changes))

    def _on_task_deleted(self, change: Change) -> None:
        remote_id = self.task_ids.pop(change.item_id, change.item_id)
        self.client.delete_task(remote_id)

    def _on_category_created(self, change: Change) -> None:
        category = change.item
        created = self.client.create_category(category.name, category.color)
        self.category_ids[category.id] = created.id

    def _on_category_deleted(self, change: Change) -> None:
        remote_id = self.category_ids.pop(change.item_id, change.item_id)
        self.client.delete_category(remote_id)

    def _report(self, action: str, exc: RemoteApiError) -> None:
        self._log.warning("remote %s failed: %s", action, exc)
        if self.on_error is not None:
            self.on_error(f"Could not sync with server: {exc.message}")


__all__ = ["RemoteMirror"]
