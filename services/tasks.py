# taskboard/services/tasks.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from core.errors import NotFoundError
from core.logs import get_logger
from helpers.reminders import ReminderOption, resolve_reminder
from models.task import Task, TaskUpdate
from services.board import TaskBoard
from services.events import TASK_CREATED, TASK_DELETED, TASK_UPDATED, Change, ChangeEvents

log = get_logger("tasks")


class TaskService:
    def __init__(self, board: TaskBoard, events: Optional[ChangeEvents] = None):
        self.board = board
        self.events = events or ChangeEvents()

    def _require(self, task_id: str) -> Task:
        task = self.board.get_task(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        return task

    def _apply(self, task: Task, changes: Dict[str, Any]) -> Task:
        for key, value in changes.items():
            setattr(task, key, value)
        self.events.emit(Change(TASK_UPDATED, task.id, task, dict(changes)))
        return task

    def get(self, task_id: str) -> Optional[Task]:
        return self.board.get_task(task_id)

    def list(self) -> List[Task]:
        return self.board.tasks()

    def create_task(
        self,
        title: str,
        *,
        reminder_date: Optional[datetime] = None,
        category_id: Optional[str] = None,
        due_date: Optional[datetime] = None,
    ) -> Optional[Task]:
        """Add a task; a blank title leaves the board untouched and returns ``None``."""

        title = (title or "").strip()
        if not title:
            log.debug("ignored task with blank title")
            return None
        task = Task(
            title=title,
            reminder_date=reminder_date,
            category_id=category_id,
            due_date=due_date,
        )
        self.board.insert_task(task)
        self.events.emit(Change(TASK_CREATED, task.id, task))
        return task

    def toggle_complete(self, task_id: str) -> Task:
        task = self._require(task_id)
        return self._apply(task, {"completed": not task.completed})

    def toggle_star(self, task_id: str) -> Task:
        task = self._require(task_id)
        return self._apply(task, {"is_starred": not task.is_starred})

    def update_category(self, task_id: str, category_id: Optional[str]) -> Task:
        # no existence check: unknown ids read as uncategorized
        task = self._require(task_id)
        return self._apply(task, {"category_id": category_id or None})

    def reschedule(self, task_id: str, when: Optional[datetime]) -> Task:
        task = self._require(task_id)
        return self._apply(task, {"due_date": when})

    def set_reminder(
        self,
        task_id: str,
        option: ReminderOption | str,
        *,
        now: Optional[datetime] = None,
        custom_date: str | None = None,
        custom_time: str | None = None,
    ) -> Task:
        """Resolve a reminder preset onto a task.

        Raises ``ParseError`` for an invalid custom date/time; the task keeps
        its previous reminder in that case.
        """

        task = self._require(task_id)
        when = resolve_reminder(option, now, custom_date=custom_date, custom_time=custom_time)
        return self._apply(task, {"reminder_date": when})

    def edit_fields(self, task_id: str, update: TaskUpdate) -> Task:
        task = self._require(task_id)
        changes = update.changes()
        if not changes:
            return task
        return self._apply(task, changes)

    def delete_task(self, task_id: str) -> Task:
        task = self.board.remove_task(task_id)
        if task is None:
            raise NotFoundError("Task", task_id)
        self.events.emit(Change(TASK_DELETED, task_id, task))
        return task


__all__ = ["TaskService"]
