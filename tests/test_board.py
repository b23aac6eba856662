from datetime import datetime

import pytest

from models.category import Category
from models.task import Task
from services.board import TaskBoard


def test_insert_rejects_blank_title(board):
    assert board.insert_task(Task(title="   ")) is False
    assert len(board) == 0


def test_insert_rejects_duplicate_id(board):
    assert board.insert_task(Task(id="a", title="First"))
    with pytest.raises(ValueError):
        board.insert_task(Task(id="a", title="Second"))
    assert board.get_task("a").title == "First"


def test_collections_keep_insertion_order(board):
    for name in ("c", "a", "b"):
        board.insert_task(Task(id=name, title=name.upper()))
    assert [t.id for t in board.tasks()] == ["c", "a", "b"]


def test_remove_missing_returns_none(board):
    assert board.remove_task("nope") is None
    assert board.remove_category("nope") is None
    assert board.get_category(None) is None


def test_snapshot_round_trip_restores_dates():
    due = datetime(2024, 3, 15, 0, 0)
    reminder = datetime(2024, 3, 14, 9, 30)
    source = TaskBoard(
        tasks=[Task(id="t1", title="A", due_date=due, reminder_date=reminder, category_id="w")],
        categories=[Category(id="w", name="Work", color="#FF0000")],
    )
    snapshot = source.to_snapshot()
    assert snapshot["tasks"][0]["due_date"] == "2024-03-15T00:00:00"

    restored = TaskBoard.from_snapshot(snapshot)
    task = restored.get_task("t1")
    assert task.due_date == due
    assert task.reminder_date == reminder
    assert restored.get_category("w").color == "#FF0000"


def test_load_snapshot_drops_blank_entries(board):
    board.load_snapshot(
        {
            "tasks": [{"id": "1", "title": "Keep"}, {"id": "2", "title": " "}],
            "categories": [{"id": "x", "name": ""}],
        }
    )
    assert [t.id for t in board.tasks()] == ["1"]
    assert board.categories() == []


def test_load_empty_snapshot_clears(board):
    board.insert_task(Task(title="Old"))
    board.load_snapshot(None)
    assert len(board) == 0
