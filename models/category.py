# taskboard/models/category.py
from __future__ import annotations

from sqlmodel import Field, SQLModel

from core.settings import UI
from models.task import new_id


class Category(SQLModel):
    id: str = Field(default_factory=new_id)
    name: str
    color: str = UI.tasks.default_category_color


__all__ = ["Category"]
