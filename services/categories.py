# taskboard/services/categories.py
from __future__ import annotations

from typing import List, Optional

from core.errors import NotFoundError
from core.logs import get_logger
from core.settings import UI
from models.category import Category
from services.board import TaskBoard
from services.events import CATEGORY_CREATED, CATEGORY_DELETED, Change, ChangeEvents

log = get_logger("categories")


class CategoryService:
    def __init__(self, board: TaskBoard, events: Optional[ChangeEvents] = None):
        self.board = board
        self.events = events or ChangeEvents()

    def list(self) -> List[Category]:
        return self.board.categories()

    def get(self, category_id: str) -> Optional[Category]:
        return self.board.get_category(category_id)

    def create(self, name: str, color_hex: Optional[str] = None) -> Optional[Category]:
        """Add a category; a blank name is ignored. A blank color falls back to the default."""

        name = (name or "").strip()
        color = (color_hex or "").strip() or UI.tasks.default_category_color
        if not name:
            log.debug("ignored category with blank name")
            return None
        category = Category(name=name, color=color)
        self.board.insert_category(category)
        self.events.emit(Change(CATEGORY_CREATED, category.id, category))
        return category

    def delete(self, category_id: str) -> Category:
        """Remove a category and detach it from every task in one step."""

        category = self.board.get_category(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        affected = []
        for task in self.board.tasks():
            if task.category_id == category_id:
                task.category_id = None
                affected.append(task.id)
        self.board.remove_category(category_id)
        self.events.emit(Change(CATEGORY_DELETED, category_id, category, affected=tuple(affected)))
        return category


__all__ = ["CategoryService"]
