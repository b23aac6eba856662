from datetime import date

import pytest

from helpers.calendar_grid import (
    build_month_days,
    build_month_grid,
    days_in_month,
    month_title,
    shift_month,
)


def test_days_in_month_zero_based():
    assert days_in_month(2024, 1) == 29
    assert days_in_month(2023, 1) == 28
    assert days_in_month(2024, 11) == 31


def test_month_out_of_range_raises():
    with pytest.raises(ValueError):
        days_in_month(2024, 12)
    with pytest.raises(ValueError):
        build_month_grid(2024, -1)


def test_shift_month_wraps_years():
    assert shift_month(2024, 0, -1) == (2023, 11)
    assert shift_month(2024, 11, 1) == (2025, 0)
    assert shift_month(2024, 5, 0) == (2024, 5)


def test_month_title():
    assert month_title(2024, 2) == "March 2024"


def test_march_2024_starts_with_february_tail():
    # 1 March 2024 is a Friday
    cells = build_month_days(2024, 2)
    assert [c.day for c in cells[:5]] == [26, 27, 28, 29, 1]
    assert [c.in_month for c in cells[:5]] == [False, False, False, False, True]
    assert cells[0].date == date(2024, 2, 26)
    assert len(cells) == 35
    assert cells[-1].date == date(2024, 3, 31)


def test_month_starting_on_monday_has_no_leading_cells():
    cells = build_month_days(2024, 3)  # April 2024
    assert cells[0].date == date(2024, 4, 1)
    assert cells[0].in_month
    assert [c.day for c in cells[-5:]] == [1, 2, 3, 4, 5]
    assert not any(c.in_month for c in cells[-5:])


def test_month_starting_on_sunday_needs_six_weeks():
    weeks = build_month_grid(2024, 8)  # September 2024
    assert len(weeks) == 6
    assert all(len(week) == 7 for week in weeks)
    assert weeks[0][0].date == date(2024, 8, 26)
    assert weeks[0][6].date == date(2024, 9, 1)
    assert weeks[-1][-1].date == date(2024, 10, 6)


@pytest.mark.parametrize("year", [2023, 2024, 2025, 2026])
def test_every_month_is_whole_monday_first_weeks(year):
    for month in range(12):
        cells = build_month_days(year, month)
        inside = [c.day for c in cells if c.in_month]
        assert inside == list(range(1, days_in_month(year, month) + 1))
        assert len(cells) % 7 == 0
        assert cells[0].date.weekday() == 0
