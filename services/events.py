"""Change notifications emitted after every applied mutation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Set

from core.logs import get_logger

TASK_CREATED = "task_created"
TASK_UPDATED = "task_updated"
TASK_DELETED = "task_deleted"
CATEGORY_CREATED = "category_created"
CATEGORY_DELETED = "category_deleted"

EVENTS = (TASK_CREATED, TASK_UPDATED, TASK_DELETED, CATEGORY_CREATED, CATEGORY_DELETED)
ALL = "*"


@dataclass(frozen=True)
class Change:
    event: str
    item_id: str
    item: Optional[Any] = None
    changes: Dict[str, Any] = field(default_factory=dict)
    # task ids touched as a side effect (category delete)
    affected: tuple[str, ...] = ()


Listener = Callable[[Change], None]


class ChangeEvents:
    def __init__(self) -> None:
        self._listeners: Dict[str, Set[Listener]] = {name: set() for name in (*EVENTS, ALL)}
        self._log = get_logger("events")

    def subscribe(self, event: str, callback: Listener) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unsupported event: {event}")
        self._listeners[event].add(callback)

    def unsubscribe(self, event: str, callback: Listener) -> None:
        if event not in self._listeners:
            return
        self._listeners[event].discard(callback)

    def emit(self, change: Change) -> None:
        listeners = [*self._listeners.get(change.event, ()), *self._listeners[ALL]]
        for listener in listeners:
            try:
                listener(change)
            except Exception:
                self._log.exception("listener %r failed on %s %s", listener, change.event, change.item_id)


__all__ = [
    "ALL",
    "CATEGORY_CREATED",
    "CATEGORY_DELETED",
    "Change",
    "ChangeEvents",
    "EVENTS",
    "TASK_CREATED",
    "TASK_DELETED",
    "TASK_UPDATED",
]
