import pytest

from services.events import ALL, TASK_CREATED, TASK_DELETED, Change, ChangeEvents


def test_specific_and_wildcard_listeners():
    events = ChangeEvents()
    specific, everything = [], []
    events.subscribe(TASK_CREATED, specific.append)
    events.subscribe(ALL, everything.append)

    events.emit(Change(TASK_CREATED, "1"))
    events.emit(Change(TASK_DELETED, "1"))

    assert [c.event for c in specific] == [TASK_CREATED]
    assert [c.event for c in everything] == [TASK_CREATED, TASK_DELETED]


def test_unknown_event_rejected():
    with pytest.raises(ValueError):
        ChangeEvents().subscribe("task_exploded", lambda change: None)


def test_failing_listener_does_not_stop_others():
    events = ChangeEvents()
    seen = []

    def broken(change):
        raise RuntimeError("boom")

    events.subscribe(ALL, broken)
    events.subscribe(TASK_CREATED, seen.append)
    events.emit(Change(TASK_CREATED, "1"))
    assert len(seen) == 1


def test_unsubscribe():
    events = ChangeEvents()
    seen = []
    events.subscribe(ALL, seen.append)
    events.unsubscribe(ALL, seen.append)
    events.emit(Change(TASK_CREATED, "1"))
    assert seen == []
