from datetime import date, datetime

from helpers.calendar_grid import build_month_days
from models.category import Category
from models.task import Task
from services.views import (
    TAB_ALL,
    TAB_COMPLETED,
    TAB_TODAY,
    UNCATEGORIZED,
    TaskFilter,
    apply_filter,
    bucket_by_day,
    category_counts,
    filter_by_category,
    filter_by_search,
    filter_by_tab,
    resolve_category,
    split_by_completion,
    tasks_for_date,
)


def _tasks():
    return [
        Task(id="1", title="Write report", category_id="w", due_date=datetime(2024, 3, 15, 9)),
        Task(id="2", title="Buy milk", completed=True),
        Task(id="3", title="Plan REPORT review", category_id="h", due_date=datetime(2024, 3, 16)),
        Task(id="4", title="Call mom", category_id="gone"),
    ]


def _ids(tasks):
    return [t.id for t in tasks]


def test_filter_by_category_selectors():
    tasks = _tasks()
    assert _ids(filter_by_category(tasks, None)) == ["1", "2", "3", "4"]
    assert _ids(filter_by_category(tasks, UNCATEGORIZED)) == ["2"]
    assert _ids(filter_by_category(tasks, "w")) == ["1"]


def test_filter_by_tab():
    tasks = _tasks()
    assert _ids(filter_by_tab(tasks, TAB_TODAY)) == ["1", "3", "4"]
    assert _ids(filter_by_tab(tasks, TAB_COMPLETED)) == ["2"]
    assert _ids(filter_by_tab(tasks, TAB_ALL)) == ["1", "2", "3", "4"]
    assert _ids(filter_by_tab(tasks, "whatever")) == ["1", "2", "3", "4"]


def test_search_is_case_insensitive_substring():
    tasks = _tasks()
    assert _ids(filter_by_search(tasks, "report")) == ["1", "3"]
    assert _ids(filter_by_search(tasks, "")) == ["1", "2", "3", "4"]


def test_tasks_for_date_matches_calendar_day():
    tasks = [Task(id="1", title="A", due_date=datetime(2024, 3, 15))]
    assert _ids(tasks_for_date(tasks, date(2024, 3, 15))) == ["1"]
    assert tasks_for_date(tasks, date(2024, 3, 16)) == []


def test_apply_filter_combines_all_criteria():
    flt = TaskFilter(category="h", tab=TAB_TODAY, query="review", on_date=date(2024, 3, 16))
    assert _ids(apply_filter(_tasks(), flt)) == ["3"]
    assert apply_filter(_tasks(), TaskFilter(category="w", tab=TAB_COMPLETED)) == []


def test_split_by_completion_keeps_order():
    sections = split_by_completion(_tasks())
    assert _ids(sections.incomplete) == ["1", "3", "4"]
    assert _ids(sections.completed) == ["2"]
    assert _ids(sections.ordered()) == ["1", "3", "4", "2"]


def test_category_counts_treat_dangling_as_uncategorized():
    categories = [Category(id="w", name="Work"), Category(id="h", name="Home")]
    counts = category_counts(_tasks(), categories)
    assert counts["w"] == 1
    assert counts["h"] == 1
    assert counts[UNCATEGORIZED] == 2
    assert counts[None] == 4


def test_resolve_category_missing_is_none():
    categories = [Category(id="w", name="Work")]
    tasks = _tasks()
    assert resolve_category(tasks[0], categories).name == "Work"
    assert resolve_category(tasks[3], categories) is None
    assert resolve_category(tasks[1], categories) is None


def test_bucket_by_day_only_visible_cells():
    cells = build_month_days(2024, 2)
    tasks = _tasks() + [Task(id="5", title="Later", due_date=datetime(2024, 5, 1))]
    buckets = bucket_by_day(tasks, cells)
    assert len(buckets) == len(cells)
    assert _ids(buckets[date(2024, 3, 15)]) == ["1"]
    assert _ids(buckets[date(2024, 3, 16)]) == ["3"]
    assert date(2024, 5, 1) not in buckets


def test_dangling_reference_listed_where_it_is_counted():
    categories = [Category(id="w", name="Work")]
    tasks = [
        Task(id="1", title="Orphan", category_id="gone"),
        Task(id="2", title="Work item", category_id="w"),
        Task(id="3", title="Loose"),
    ]
    counts = category_counts(tasks, categories)
    listed = apply_filter(tasks, TaskFilter(category=UNCATEGORIZED), categories)

    assert counts[UNCATEGORIZED] == len(listed) == 2
    assert _ids(listed) == ["1", "3"]
    assert _ids(filter_by_category(tasks, UNCATEGORIZED, {"w"})) == ["1", "3"]
    assert _ids(apply_filter(tasks, TaskFilter(category="w"), categories)) == ["2"]
