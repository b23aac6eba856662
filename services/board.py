# taskboard/services/board.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from models.category import Category
from models.task import Task


class TaskBoard:
    """In-memory owner of the task and category collections of one session.

    Both collections keep insertion order. Everything else reads through this
    object or changes it through :class:`services.tasks.TaskService` and
    :class:`services.categories.CategoryService`.
    """

    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        categories: Optional[Iterable[Category]] = None,
    ) -> None:
        self._tasks: Dict[str, Task] = {}
        self._categories: Dict[str, Category] = {}
        self.replace(tasks or [], categories or [])

    # ----- tasks -----
    def insert_task(self, task: Task) -> bool:
        if not task.title or not task.title.strip():
            return False
        if task.id in self._tasks:
            raise ValueError(f"Duplicate task id: {task.id}")
        self._tasks[task.id] = task
        return True

    def get_task(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    def remove_task(self, task_id: str) -> Optional[Task]:
        return self._tasks.pop(task_id, None)

    def tasks(self) -> List[Task]:
        return list(self._tasks.values())

    # ----- categories -----
    def insert_category(self, category: Category) -> bool:
        if not category.name or not category.name.strip():
            return False
        if category.id in self._categories:
            raise ValueError(f"Duplicate category id: {category.id}")
        self._categories[category.id] = category
        return True

    def get_category(self, category_id: Optional[str]) -> Optional[Category]:
        if category_id is None:
            return None
        return self._categories.get(category_id)

    def remove_category(self, category_id: str) -> Optional[Category]:
        return self._categories.pop(category_id, None)

    def categories(self) -> List[Category]:
        return list(self._categories.values())

    # ----- bulk -----
    def replace(self, tasks: Iterable[Task], categories: Iterable[Category]) -> None:
        """Swap both collections at once, e.g. after loading persisted state."""

        new_tasks: Dict[str, Task] = {}
        for task in tasks:
            if task.title and task.title.strip():
                new_tasks[task.id] = task
        new_categories: Dict[str, Category] = {}
        for category in categories:
            if category.name and category.name.strip():
                new_categories[category.id] = category
        self._tasks = new_tasks
        self._categories = new_categories

    def to_snapshot(self) -> Dict[str, Any]:
        return {
            "tasks": [t.model_dump(mode="json") for t in self._tasks.values()],
            "categories": [c.model_dump(mode="json") for c in self._categories.values()],
        }

    @classmethod
    def from_snapshot(cls, snapshot: Optional[Dict[str, Any]]) -> "TaskBoard":
        board = cls()
        board.load_snapshot(snapshot)
        return board

    def load_snapshot(self, snapshot: Optional[Dict[str, Any]]) -> None:
        if not snapshot:
            self.replace([], [])
            return
        tasks = [Task.model_validate(item) for item in snapshot.get("tasks") or []]
        categories = [Category.model_validate(item) for item in snapshot.get("categories") or []]
        self.replace(tasks, categories)

    def __len__(self) -> int:
        return len(self._tasks)


__all__ = ["TaskBoard"]
