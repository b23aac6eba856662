"""Read-only task views: filtering, completion sections, per-day buckets."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Collection, Dict, Iterable, List, Optional, Sequence, Union

from helpers.calendar_grid import CalendarDay
from helpers.datetime_utils import same_day
from models.category import Category
from models.task import Task

UNCATEGORIZED = "uncategorized"

TAB_ALL = "all"
TAB_TODAY = "today"
TAB_COMPLETED = "completed"


@dataclass(frozen=True)
class TaskFilter:
    category: Optional[str] = None
    tab: str = TAB_ALL
    query: str = ""
    on_date: Optional[date] = None


@dataclass
class TaskSections:
    incomplete: List[Task] = field(default_factory=list)
    completed: List[Task] = field(default_factory=list)

    def ordered(self) -> List[Task]:
        return [*self.incomplete, *self.completed]


def is_uncategorized(task: Task, known: Optional[Collection[str]] = None) -> bool:
    """Unset ``category_id``, or one missing from ``known`` when that is given."""

    if not task.category_id:
        return True
    return known is not None and task.category_id not in known


def filter_by_category(
    tasks: Iterable[Task],
    selector: Optional[str],
    known: Optional[Collection[str]] = None,
) -> List[Task]:
    if selector is None:
        return list(tasks)
    if selector == UNCATEGORIZED:
        return [t for t in tasks if is_uncategorized(t, known)]
    return [t for t in tasks if t.category_id == selector]


def filter_by_tab(tasks: Iterable[Task], tab: Optional[str]) -> List[Task]:
    if tab == TAB_TODAY:
        return [t for t in tasks if not t.completed]
    if tab == TAB_COMPLETED:
        return [t for t in tasks if t.completed]
    return list(tasks)


def filter_by_search(tasks: Iterable[Task], query: Optional[str]) -> List[Task]:
    needle = (query or "").lower()
    if not needle:
        return list(tasks)
    return [t for t in tasks if needle in t.title.lower()]


def tasks_for_date(tasks: Iterable[Task], day: Union[date, datetime]) -> List[Task]:
    return [t for t in tasks if t.due_date is not None and same_day(t.due_date, day)]


def apply_filter(
    tasks: Iterable[Task],
    flt: TaskFilter,
    categories: Optional[Sequence[Category]] = None,
) -> List[Task]:
    """AND chain of category, tab, search and date.

    With ``categories`` given, tasks pointing at a missing category match the
    uncategorized selector, the same way :func:`category_counts` counts them.
    """

    known = None if categories is None else {c.id for c in categories}
    result = filter_by_category(tasks, flt.category, known)
    result = filter_by_tab(result, flt.tab)
    result = filter_by_search(result, flt.query)
    if flt.on_date is not None:
        result = tasks_for_date(result, flt.on_date)
    return result


def split_by_completion(tasks: Iterable[Task]) -> TaskSections:
    sections = TaskSections()
    for task in tasks:
        (sections.completed if task.completed else sections.incomplete).append(task)
    return sections


def category_counts(
    tasks: Iterable[Task], categories: Sequence[Category]
) -> Dict[Optional[str], int]:
    """Number of tasks per category id, plus ``uncategorized`` and the total under ``None``.

    References to categories that no longer exist count as uncategorized.
    """

    known = {c.id for c in categories}
    counts: Dict[Optional[str], int] = {c.id: 0 for c in categories}
    counts[UNCATEGORIZED] = 0
    total = 0
    for task in tasks:
        total += 1
        key = UNCATEGORIZED if is_uncategorized(task, known) else task.category_id
        counts[key] += 1
    counts[None] = total
    return counts


def resolve_category(task: Task, categories: Sequence[Category]) -> Optional[Category]:
    for category in categories:
        if category.id == task.category_id:
            return category
    return None


def bucket_by_day(tasks: Iterable[Task], cells: Iterable[CalendarDay]) -> Dict[date, List[Task]]:
    """Tasks grouped under every visible calendar cell, in insertion order."""

    buckets: Dict[date, List[Task]] = {cell.date: [] for cell in cells}
    for task in tasks:
        if task.due_date is None:
            continue
        key = task.due_date.date()
        if key in buckets:
            buckets[key].append(task)
    return buckets


__all__ = [
    "TAB_ALL",
    "TAB_COMPLETED",
    "TAB_TODAY",
    "TaskFilter",
    "TaskSections",
    "UNCATEGORIZED",
    "apply_filter",
    "bucket_by_day",
    "category_counts",
    "filter_by_category",
    "filter_by_search",
    "filter_by_tab",
    "is_uncategorized",
    "resolve_category",
    "split_by_completion",
    "tasks_for_date",
]
