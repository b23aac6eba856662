"""Save the board to local storage after every change."""
from __future__ import annotations

from typing import Callable, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from core.logs import get_logger
from core.settings import STORAGE
from services.board import TaskBoard
from services.events import ALL, Change, ChangeEvents
from storage.snapshots import SnapshotStore


class LocalAutosave:
    def __init__(
        self,
        store: SnapshotStore,
        board: TaskBoard,
        events: ChangeEvents,
        *,
        key: str = STORAGE.snapshot_key,
        on_error: Optional[Callable[[str], None]] = None,
    ):
        self.store = store
        self.board = board
        self.events = events
        self.key = key
        self.on_error = on_error
        self._log = get_logger("storage.autosave")

    def attach(self) -> None:
        self.events.subscribe(ALL, self.handle)

    def detach(self) -> None:
        self.events.unsubscribe(ALL, self.handle)

    def load(self) -> bool:
        try:
            snapshot = self.store.load(self.key)
        except SQLAlchemyError as exc:
            self._report("load", exc)
            return False
        if snapshot is None:
            return False
        try:
            self.board.load_snapshot(snapshot)
        except ValidationError as exc:
            self._report("load", exc)
            return False
        self._log.info("loaded %d tasks from %r", len(self.board), self.key)
        return True

    def save(self) -> bool:
        try:
            self.store.save(self.key, self.board.to_snapshot())
        except (SQLAlchemyError, OSError) as exc:
            self._report("save", exc)
            return False
        return True

    def handle(self, change: Change) -> None:
        self.save()

    def _report(self, action: str, exc: Exception) -> None:
        self._log.warning("local %s failed: %s", action, exc)
        if self.on_error is not None:
            if action == "save":
                self.on_error("Changes could not be saved locally")
            else:
                self.on_error("Saved tasks could not be loaded")


__all__ = ["LocalAutosave"]
