"""Records exposed by the Taskboard application."""
from .task import Task, TaskUpdate, new_id
from .category import Category
from .snapshot import Snapshot

__all__ = ["Task", "TaskUpdate", "Category", "Snapshot", "new_id"]
