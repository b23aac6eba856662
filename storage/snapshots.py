"""Local persistence of board snapshots keyed by name."""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from sqlmodel import Session

from core.logs import get_logger
from models.snapshot import Snapshot
from storage.db import get_session

log = get_logger("storage")


def _serialise(snapshot: Dict[str, Any]) -> str:
    return json.dumps(snapshot, ensure_ascii=False, sort_keys=True)


def _deserialise(payload: Optional[str]) -> Optional[Dict[str, Any]]:
    if not payload:
        return None
    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        log.warning("snapshot payload is not valid JSON; ignoring it")
        return None
    if isinstance(data, dict):
        return data
    return None


class SnapshotStore:
    """``load``/``save`` of ``{"tasks": [...], "categories": [...]}`` documents."""

    def __init__(self, session_factory: Callable[[], Session] = get_session):
        self._session_factory = session_factory

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        with self._session_factory() as session:
            row = session.get(Snapshot, key)
            return _deserialise(row.payload if row else None)

    def save(self, key: str, snapshot: Dict[str, Any]) -> None:
        payload = _serialise(snapshot)
        with self._session_factory() as session:
            row = session.get(Snapshot, key)
            if row is None:
                row = Snapshot(key=key, payload=payload)
            else:
                row.payload = payload
                row.updated_at = datetime.now()
            session.add(row)
            session.commit()

    def delete(self, key: str) -> None:
        with self._session_factory() as session:
            row = session.get(Snapshot, key)
            if row is not None:
                session.delete(row)
                session.commit()


__all__ = ["SnapshotStore"]
