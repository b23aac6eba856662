from datetime import datetime

import pytest

from core.errors import NotFoundError, ParseError
from helpers.reminders import ReminderOption
from models.task import TaskUpdate
from services.events import TASK_CREATED, TASK_DELETED, TASK_UPDATED


def test_create_task_appends_and_emits(tasks, recorded):
    task = tasks.create_task("  Write report  ", category_id="w")
    assert task is not None
    assert task.title == "Write report"
    assert task.completed is False
    assert task.is_starred is False
    assert tasks.list() == [task]
    assert [c.event for c in recorded] == [TASK_CREATED]
    assert recorded[0].item is task


def test_create_task_blank_title_is_ignored(tasks, recorded):
    assert tasks.create_task("   ") is None
    assert tasks.list() == []
    assert recorded == []


def test_created_ids_are_unique(tasks):
    ids = {tasks.create_task(f"Task {i}").id for i in range(50)}
    assert len(ids) == 50


def test_toggle_complete_twice_restores(tasks, recorded):
    task = tasks.create_task("A")
    tasks.toggle_complete(task.id)
    assert task.completed is True
    tasks.toggle_complete(task.id)
    assert task.completed is False
    assert [c.changes for c in recorded[1:]] == [{"completed": True}, {"completed": False}]


def test_toggle_star(tasks):
    task = tasks.create_task("A")
    assert tasks.toggle_star(task.id).is_starred is True


def test_missing_task_raises(tasks):
    with pytest.raises(NotFoundError):
        tasks.toggle_complete("nope")
    with pytest.raises(NotFoundError):
        tasks.delete_task("nope")


def test_update_category_allows_unknown_and_clearing(tasks):
    task = tasks.create_task("A")
    tasks.update_category(task.id, "does-not-exist")
    assert task.category_id == "does-not-exist"
    tasks.update_category(task.id, "")
    assert task.category_id is None


def test_reschedule_sets_due_date(tasks, recorded):
    task = tasks.create_task("A")
    when = datetime(2024, 3, 16)
    tasks.reschedule(task.id, when)
    assert task.due_date == when
    assert recorded[-1].event == TASK_UPDATED
    assert recorded[-1].changes == {"due_date": when}


def test_set_reminder_from_preset(tasks):
    task = tasks.create_task("A")
    now = datetime(2024, 3, 13, 11, 0)
    tasks.set_reminder(task.id, ReminderOption.WEEKEND, now=now)
    assert task.reminder_date == datetime(2024, 3, 16, 10, 0)
    tasks.set_reminder(task.id, ReminderOption.NONE, now=now)
    assert task.reminder_date is None


def test_invalid_custom_reminder_changes_nothing(tasks, recorded):
    task = tasks.create_task("A")
    tasks.set_reminder(task.id, "tomorrow", now=datetime(2024, 3, 13, 11, 0))
    before = task.reminder_date
    count = len(recorded)
    with pytest.raises(ParseError):
        tasks.set_reminder(task.id, ReminderOption.CUSTOM, custom_date="2024-13-01", custom_time="10:00")
    assert task.reminder_date == before
    assert len(recorded) == count


def test_edit_fields_only_touches_given_slots(tasks, recorded):
    task = tasks.create_task("A", category_id="w", due_date=datetime(2024, 3, 15))
    tasks.edit_fields(task.id, TaskUpdate(title="  B  ", due_date=None))
    assert task.title == "B"
    assert task.due_date is None
    assert task.category_id == "w"
    assert recorded[-1].changes == {"title": "B", "due_date": None}


def test_edit_fields_blank_title_kept(tasks, recorded):
    task = tasks.create_task("Original")
    count = len(recorded)
    tasks.edit_fields(task.id, TaskUpdate(title="   "))
    assert task.title == "Original"
    assert len(recorded) == count


def test_delete_task_removes_and_emits(tasks, recorded):
    keep = tasks.create_task("Keep")
    gone = tasks.create_task("Gone")
    tasks.delete_task(gone.id)
    assert tasks.list() == [keep]
    assert recorded[-1].event == TASK_DELETED
    assert recorded[-1].item_id == gone.id
