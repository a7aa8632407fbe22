"""Schedule kinds that turn a recurring (or one-off) amount into concrete dates.

Every variant validates its input and computes its full date tuple when it is
constructed; instances are frozen afterwards and never fail again.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta

from .calendar_math import (
    add_years,
    anchor_month_day_back,
    anchor_month_day_forward,
    date_for_month,
    month_index,
    round_back_to_weekday,
    round_up_to_weekday,
)
from .errors import MonthDayOutOfRangeError, StartAfterEndError, WeekdayOutOfRangeError
from .types import PositiveValue, Uncertainty
from .uncertainty import check_bounds, max_bound, min_bound

logger = logging.getLogger(__name__)


class Delta:
    """Common interface shared by every schedule kind."""

    name: str
    value: float
    uncertainty: Uncertainty | None
    dates: tuple[date, ...]

    def max_value(self) -> float:
        return max_bound(self.value, self.uncertainty)

    def min_value(self) -> float:
        return min_bound(self.value, self.uncertainty)

    def _set_dates(self, dates: tuple[date, ...]) -> None:
        object.__setattr__(self, "dates", dates)
        logger.debug("%s %r expanded to %d dates", type(self).__name__, self.name, len(dates))


def _check_range(start: date, end: date) -> None:
    if start > end:
        raise StartAfterEndError(start, end)


def _every(skip: int) -> int:
    PositiveValue(skip)
    return skip + 1


@dataclass(frozen=True)
class OneTimeDelta(Delta):
    name: str
    value: float
    on: date
    uncertainty: Uncertainty | None = None
    dates: tuple[date, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_bounds(self.value, self.uncertainty)
        self._set_dates((self.on,))


@dataclass(frozen=True)
class CustomDelta(Delta):
    """Caller-picked dates, kept in the order given (duplicates count twice)."""

    name: str
    value: float
    on_dates: tuple[date, ...]
    uncertainty: Uncertainty | None = None
    dates: tuple[date, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_bounds(self.value, self.uncertainty)
        object.__setattr__(self, "on_dates", tuple(self.on_dates))
        self._set_dates(self.on_dates)


@dataclass(frozen=True)
class DailyDelta(Delta):
    name: str
    value: float
    start: date
    end: date
    uncertainty: Uncertainty | None = None
    skip_days: int = 0
    dates: tuple[date, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_bounds(self.value, self.uncertainty)
        _check_range(self.start, self.end)
        every = _every(self.skip_days)

        n_steps = (self.end - self.start).days // every
        self._set_dates(tuple(self.start + timedelta(days=every * i) for i in range(n_steps + 1)))


@dataclass(frozen=True)
class WeeklyDelta(Delta):
    """Lands on ``on_weekday`` (Monday is 0) every ``skip_weeks + 1`` weeks.

    ``start`` is rounded forward and ``end`` backward to the target weekday;
    when that leaves no such weekday inside the window the schedule is empty.
    """

    name: str
    value: float
    start: date
    end: date
    uncertainty: Uncertainty | None = None
    on_weekday: int | None = None
    skip_weeks: int = 0
    dates: tuple[date, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_bounds(self.value, self.uncertainty)
        _check_range(self.start, self.end)
        if self.on_weekday is None:
            object.__setattr__(self, "on_weekday", self.start.weekday())
        elif not 0 <= self.on_weekday <= 6:
            raise WeekdayOutOfRangeError(self.on_weekday)
        every = _every(self.skip_weeks)

        first = round_up_to_weekday(self.start, self.on_weekday)
        last = round_back_to_weekday(self.end, self.on_weekday)
        if first > last:
            self._set_dates(())
            return

        n_steps = (last - first).days // (7 * every)
        self._set_dates(tuple(first + timedelta(weeks=every * i) for i in range(n_steps + 1)))


@dataclass(frozen=True)
class MonthlyDelta(Delta):
    """Lands on ``on_month_day`` every ``skip_months + 1`` months.

    Months shorter than the requested day use their last day instead.
    """

    name: str
    value: float
    start: date
    end: date
    on_month_day: int
    uncertainty: Uncertainty | None = None
    skip_months: int = 0
    dates: tuple[date, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_bounds(self.value, self.uncertainty)
        _check_range(self.start, self.end)
        if not 1 <= self.on_month_day <= 31:
            raise MonthDayOutOfRangeError(self.on_month_day)
        every = _every(self.skip_months)

        first = anchor_month_day_forward(self.start, self.on_month_day)
        last = anchor_month_day_back(self.end, self.on_month_day)
        if first > last:
            self._set_dates(())
            return

        first_month = month_index(first)
        n_steps = (month_index(last) - first_month) // every
        self._set_dates(
            tuple(date_for_month(first_month + every * i, self.on_month_day) for i in range(n_steps + 1))
        )


@dataclass(frozen=True)
class YearlyDelta(Delta):
    name: str
    value: float
    start: date
    end: date
    uncertainty: Uncertainty | None = None
    skip_years: int = 0
    dates: tuple[date, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_bounds(self.value, self.uncertainty)
        _check_range(self.start, self.end)
        every = _every(self.skip_years)

        dates: list[date] = []
        n_years = 0
        while self.start.year + n_years <= self.end.year:
            current = add_years(self.start, n_years)
            if current > self.end:
                break
            dates.append(current)
            n_years += every
        self._set_dates(tuple(dates))
