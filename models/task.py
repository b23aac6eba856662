# taskboard/models/task.py
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlmodel import Field, SQLModel


def new_id() -> str:
    return str(uuid.uuid4())


class Task(SQLModel):
    id: str = Field(default_factory=new_id)
    title: str
    completed: bool = False
    is_starred: bool = False
    category_id: Optional[str] = None
    reminder_date: Optional[datetime] = None
    due_date: Optional[datetime] = None
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)


class TaskUpdate(SQLModel):
    """Partial update for a task.

    Only the slots that were actually passed are applied; passing ``None``
    explicitly clears an optional field. A blank ``title`` is ignored.
    """

    title: Optional[str] = None
    category_id: Optional[str] = None
    due_date: Optional[datetime] = None
    reminder_date: Optional[datetime] = None
    description: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        values = self.model_dump(exclude_unset=True)
        title = values.get("title")
        if "title" in values:
            if title is None or not title.strip():
                values.pop("title")
            else:
                values["title"] = title.strip()
        return values


__all__ = ["Task", "TaskUpdate", "new_id"]
