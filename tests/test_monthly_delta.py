from datetime import date

import pytest

from moolah.deltas import MonthlyDelta


def _monthly(start: date, end: date, on_month_day: int, skip_months: int) -> tuple[date, ...]:
    return MonthlyDelta("test", 0.0, start, end, on_month_day, skip_months=skip_months).dates


def test_falls_on_month_day_every_month() -> None:
    dates = _monthly(date(2022, 10, 30), date(2024, 12, 30), 30, 0)

    assert len(dates) == 27
    assert dates[0] == date(2022, 10, 30)
    assert dates[-1] == date(2024, 12, 30)
    assert date(2023, 2, 28) in dates
    assert date(2024, 2, 29) in dates
    # the 30th comes back after a short February
    assert date(2023, 3, 30) in dates
    assert date(2024, 3, 30) in dates
    assert list(dates) == sorted(dates)


@pytest.mark.parametrize(
    "skip_months, expected",
    [
        (
            1,
            [
                date(2022, 10, 30),
                date(2022, 12, 30),
                date(2023, 2, 28),
                date(2023, 4, 30),
                date(2023, 6, 30),
                date(2023, 8, 30),
                date(2023, 10, 30),
                date(2023, 12, 30),
                date(2024, 2, 29),
                date(2024, 4, 30),
                date(2024, 6, 30),
                date(2024, 8, 30),
                date(2024, 10, 30),
                date(2024, 12, 30),
            ],
        ),
        (
            2,
            [
                date(2022, 10, 30),
                date(2023, 1, 30),
                date(2023, 4, 30),
                date(2023, 7, 30),
                date(2023, 10, 30),
                date(2024, 1, 30),
                date(2024, 4, 30),
                date(2024, 7, 30),
                date(2024, 10, 30),
            ],
        ),
        (
            3,
            [
                date(2022, 10, 30),
                date(2023, 2, 28),
                date(2023, 6, 30),
                date(2023, 10, 30),
                date(2024, 2, 29),
                date(2024, 6, 30),
                date(2024, 10, 30),
            ],
        ),
        (100, [date(2022, 10, 30)]),
    ],
)
def test_falls_on_month_day_with_skips(skip_months: int, expected: list[date]) -> None:
    assert list(_monthly(date(2022, 10, 30), date(2024, 12, 30), 30, skip_months)) == expected


def test_falls_after_month_day() -> None:
    dates = _monthly(date(2022, 10, 31), date(2024, 12, 31), 30, 0)

    assert len(dates) == 26
    assert dates[0] == date(2022, 11, 30)
    assert dates[-1] == date(2024, 12, 30)
    assert date(2023, 2, 28) in dates


def test_falls_before_month_day() -> None:
    dates = _monthly(date(2022, 10, 29), date(2023, 1, 29), 30, 0)
    assert dates == (date(2022, 10, 30), date(2022, 11, 30), date(2022, 12, 30))


def test_last_day_of_month_recovers() -> None:
    dates = _monthly(date(2023, 1, 1), date(2023, 6, 30), 31, 0)
    assert dates == (
        date(2023, 1, 31),
        date(2023, 2, 28),
        date(2023, 3, 31),
        date(2023, 4, 30),
        date(2023, 5, 31),
        date(2023, 6, 30),
    )


def test_start_in_short_month_uses_clamped_day() -> None:
    dates = _monthly(date(2023, 2, 10), date(2023, 4, 1), 31, 0)
    assert dates == (date(2023, 2, 28), date(2023, 3, 31))


def test_crosses_year_boundary() -> None:
    dates = _monthly(date(2022, 11, 1), date(2023, 2, 15), 5, 0)
    assert dates == (date(2022, 11, 5), date(2022, 12, 5), date(2023, 1, 5), date(2023, 2, 5))


def test_short_window_is_empty() -> None:
    assert _monthly(date(2022, 11, 2), date(2022, 11, 20), 1, 0) == ()


def test_exposes_configuration() -> None:
    d = MonthlyDelta("rent", -900.0, date(2022, 1, 1), date(2022, 12, 31), 15, skip_months=2)
    assert d.on_month_day == 15
    assert d.skip_months == 2
    assert d.start == date(2022, 1, 1)
    assert d.end == date(2022, 12, 31)
    assert d.dates == (date(2022, 1, 15), date(2022, 4, 15), date(2022, 7, 15), date(2022, 10, 15))
