from datetime import date

import pytest

from moolah.calendar_math import (
    add_months,
    add_years,
    anchor_month_day_back,
    anchor_month_day_forward,
    clamped_date,
    round_back_to_weekday,
    round_up_to_weekday,
    shift_days,
)
from moolah.errors import DateUnreachableError

WEDNESDAY = date(2022, 11, 2)


@pytest.mark.parametrize(
    "n_months, expected",
    [
        (1, date(2022, 11, 30)),
        (2, date(2022, 12, 31)),
        (3, date(2023, 1, 31)),
        (4, date(2023, 2, 28)),
        (5, date(2023, 3, 31)),
        (16, date(2024, 2, 29)),
    ],
)
def test_add_months_targets_starting_day(n_months: int, expected: date) -> None:
    assert add_months(date(2022, 10, 31), n_months) == expected


def test_add_months_with_explicit_day_and_going_back() -> None:
    assert add_months(date(2023, 2, 28), 1, day=31) == date(2023, 3, 31)
    assert add_months(date(2023, 3, 31), -1) == date(2023, 2, 28)
    assert add_months(date(2023, 1, 15), 0) == date(2023, 1, 15)


def test_add_months_out_of_calendar_is_typed_error() -> None:
    with pytest.raises(DateUnreachableError):
        add_months(date(9999, 12, 15), 1)


def test_add_years_handles_leap_day() -> None:
    start = date(2024, 2, 29)
    assert add_years(start, 1) == date(2025, 2, 28)
    assert add_years(start, 3) == date(2027, 2, 28)
    assert add_years(start, 4) == date(2028, 2, 29)
    assert add_years(date(2022, 6, 15), 2) == date(2024, 6, 15)


def test_add_years_out_of_calendar_is_typed_error() -> None:
    with pytest.raises(DateUnreachableError):
        add_years(date(9999, 1, 1), 1)


def test_clamped_date() -> None:
    assert clamped_date(2023, 2, 31) == date(2023, 2, 28)
    assert clamped_date(2024, 2, 30) == date(2024, 2, 29)
    assert clamped_date(2023, 4, 31) == date(2023, 4, 30)
    assert clamped_date(2023, 5, 31) == date(2023, 5, 31)


@pytest.mark.parametrize(
    "weekday, expected",
    [
        (0, date(2022, 11, 7)),
        (1, date(2022, 11, 8)),
        (2, date(2022, 11, 2)),
        (3, date(2022, 11, 3)),
        (4, date(2022, 11, 4)),
        (5, date(2022, 11, 5)),
        (6, date(2022, 11, 6)),
    ],
)
def test_round_up_to_weekday(weekday: int, expected: date) -> None:
    assert round_up_to_weekday(WEDNESDAY, weekday) == expected


@pytest.mark.parametrize(
    "weekday, expected",
    [
        (0, date(2022, 10, 31)),
        (1, date(2022, 11, 1)),
        (2, date(2022, 11, 2)),
        (3, date(2022, 10, 27)),
        (4, date(2022, 10, 28)),
        (5, date(2022, 10, 29)),
        (6, date(2022, 10, 30)),
    ],
)
def test_round_back_to_weekday(weekday: int, expected: date) -> None:
    assert round_back_to_weekday(WEDNESDAY, weekday) == expected


def test_anchor_month_day() -> None:
    assert anchor_month_day_forward(date(2022, 10, 30), 30) == date(2022, 10, 30)
    assert anchor_month_day_forward(date(2022, 10, 31), 30) == date(2022, 11, 30)
    assert anchor_month_day_forward(date(2023, 2, 10), 31) == date(2023, 2, 28)
    assert anchor_month_day_forward(date(2022, 12, 20), 5) == date(2023, 1, 5)

    assert anchor_month_day_back(date(2024, 12, 31), 30) == date(2024, 12, 30)
    assert anchor_month_day_back(date(2023, 2, 28), 30) == date(2023, 2, 28)
    assert anchor_month_day_back(date(2023, 3, 15), 30) == date(2023, 2, 28)
    assert anchor_month_day_back(date(2023, 1, 3), 5) == date(2022, 12, 5)


def test_shift_days_out_of_calendar_is_typed_error() -> None:
    assert shift_days(date(2022, 12, 31), 1) == date(2023, 1, 1)
    with pytest.raises(DateUnreachableError):
        shift_days(date.max, 1)
