"""Exceptions raised by the task/category services."""
from __future__ import annotations

from typing import Optional


class TaskboardError(Exception):
    """Base class for recoverable application errors."""


class NotFoundError(TaskboardError, LookupError):
    def __init__(self, kind: str, item_id: str):
        super().__init__(f"{kind} {item_id!r} not found")
        self.kind = kind
        self.item_id = item_id


class ParseError(TaskboardError, ValueError):
    """User supplied date/time text could not be turned into a timestamp."""


class RemoteApiError(TaskboardError):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message if status is None else f"{status}: {message}")
        self.message = message
        self.status = status


__all__ = ["TaskboardError", "NotFoundError", "ParseError", "RemoteApiError"]
