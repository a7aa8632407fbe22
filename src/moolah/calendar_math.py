"""Calendar arithmetic used to expand schedules into concrete dates.

Month and year rolling always target a fixed day of month. When the target
month is too short the result is clamped to its last day, but the next roll
starts again from the requested day, so a day 31 schedule lands on Jan 31,
Feb 28, Mar 31 rather than drifting to the 28th.
"""
from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, date, timedelta

from .errors import DateUnreachableError

# No month is shorter than 28 days, so a day in [1, 31] needs at most three
# decrements to become valid.
MAX_CLAMP_STEPS = 4


def month_index(d: date) -> int:
    return d.year * 12 + d.month - 1


def clamped_date(year: int, month: int, day: int) -> date:
    if not MINYEAR <= year <= MAXYEAR:
        raise DateUnreachableError(f"{year}-{month:02d}-{day:02d}")

    target = day
    for _ in range(MAX_CLAMP_STEPS):
        try:
            return date(year, month, target)
        except ValueError:
            target -= 1
    raise DateUnreachableError(f"{year}-{month:02d}-{day:02d}")


def date_for_month(index: int, day: int) -> date:
    year, month0 = divmod(index, 12)
    return clamped_date(year, month0 + 1, day)


def add_months(start: date, n_months: int, day: int | None = None) -> date:
    target_day = start.day if day is None else day
    return date_for_month(month_index(start) + n_months, target_day)


def add_years(start: date, n_years: int) -> date:
    # Feb 29 becomes Feb 28 in common years and comes back on its own in leap years.
    return clamped_date(start.year + n_years, start.month, start.day)


def shift_days(d: date, days: int) -> date:
    try:
        return d + timedelta(days=days)
    except OverflowError as exc:
        raise DateUnreachableError(f"{d.isoformat()} {days:+d} days") from exc


def round_up_to_weekday(d: date, weekday: int) -> date:
    return shift_days(d, (weekday - d.weekday()) % 7)


def round_back_to_weekday(d: date, weekday: int) -> date:
    return shift_days(d, -((d.weekday() - weekday) % 7))


def anchor_month_day_forward(d: date, day: int) -> date:
    """First date on or after ``d`` falling on ``day`` (clamped in short months)."""
    same_month = date_for_month(month_index(d), day)
    if d <= same_month:
        return same_month
    return date_for_month(month_index(d) + 1, day)


def anchor_month_day_back(d: date, day: int) -> date:
    """Last date on or before ``d`` falling on ``day`` (clamped in short months)."""
    same_month = date_for_month(month_index(d), day)
    if d >= same_month:
        return same_month
    return date_for_month(month_index(d) - 1, day)
