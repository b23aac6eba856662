"""Month grid for the calendar page: Monday-first weeks of seven cells."""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


@dataclass(frozen=True)
class CalendarDay:
    day: int
    in_month: bool
    date: date


def _check_month(month: int) -> None:
    if not 0 <= month <= 11:
        raise ValueError(f"month must be zero-based (0..11), got {month}")


def days_in_month(year: int, month: int) -> int:
    """Number of days in the zero-based ``month`` of ``year``."""

    _check_month(month)
    return calendar.monthrange(year, month + 1)[1]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    _check_month(month)
    total = year * 12 + month + delta
    return total // 12, total % 12


def month_title(year: int, month: int) -> str:
    _check_month(month)
    return f"{MONTH_NAMES[month]} {year}"


def build_month_days(year: int, month: int) -> List[CalendarDay]:
    """Flat list of cells: previous-month tail, the month itself, next-month head."""

    count = days_in_month(year, month)
    first = date(year, month + 1, 1)
    # Sunday=0 convention re-indexed so Monday is the first column
    first_day = first.isoweekday() % 7
    first_day_index = 6 if first_day == 0 else first_day - 1

    prev_year, prev_month = shift_month(year, month, -1)
    prev_count = days_in_month(prev_year, prev_month)
    cells: List[CalendarDay] = [
        CalendarDay(day=d, in_month=False, date=date(prev_year, prev_month + 1, d))
        for d in range(prev_count - first_day_index + 1, prev_count + 1)
    ]
    cells.extend(
        CalendarDay(day=d, in_month=True, date=date(year, month + 1, d))
        for d in range(1, count + 1)
    )

    next_year, next_month = shift_month(year, month, 1)
    total = -(-len(cells) // 7) * 7
    cells.extend(
        CalendarDay(day=d, in_month=False, date=date(next_year, next_month + 1, d))
        for d in range(1, total - len(cells) + 1)
    )
    return cells


def build_month_grid(year: int, month: int) -> List[List[CalendarDay]]:
    """Weeks of the zero-based ``month``, each a list of seven :class:`CalendarDay`."""

    cells = build_month_days(year, month)
    return [cells[i : i + 7] for i in range(0, len(cells), 7)]


__all__ = [
    "CalendarDay",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "build_month_days",
    "build_month_grid",
    "days_in_month",
    "month_title",
    "shift_month",
]
