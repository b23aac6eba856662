"""Simple JSON-backed configuration store."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from core.logs import get_logger
from core.settings import CONFIG_PATH, REMOTE, STORAGE

log = get_logger("config")


@dataclass
class AppConfig:
    """User choices persisted to ``config.json``."""

    backend: str = STORAGE.default_backend
    api_base_url: str = REMOTE.base_url
    auth_token: Optional[str] = None
    user_id: Optional[str] = None
    email: Optional[str] = None
    last_category_id: Optional[str] = None

    @property
    def signed_in(self) -> bool:
        return bool(self.auth_token)


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _load_raw(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(path: Optional[Path] = None) -> AppConfig:
    data = _load_raw(path or CONFIG_PATH)
    defaults = AppConfig()
    return AppConfig(
        backend=data.get("backend") or defaults.backend,
        api_base_url=data.get("api_base_url") or defaults.api_base_url,
        auth_token=data.get("auth_token"),
        user_id=data.get("user_id"),
        email=data.get("email"),
        last_category_id=data.get("last_category_id"),
    )


def save_config(config: AppConfig, path: Optional[Path] = None) -> None:
    target = path or CONFIG_PATH
    _ensure_parent(target)
    payload = json.dumps(asdict(config), ensure_ascii=False, indent=2, sort_keys=True)
    tmp = target.with_suffix(".tmp")
    try:
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(target)
    finally:
        if tmp.exists():
            try:
                tmp.unlink()
            except OSError:
                pass


__all__ = ["AppConfig", "load_config", "save_config"]
