from __future__ import annotations

from datetime import date


class MoolahError(ValueError):
    """Base class for every error raised while building deltas."""


class NegativeValueError(MoolahError):
    def __init__(self, value: float) -> None:
        super().__init__(f"cannot create a positive value from negative value {value}")
        self.value = value


class IllogicalBoundsError(MoolahError):
    def __init__(self, low: float, high: float, value: float) -> None:
        super().__init__(f"illogical bounded uncertainty [{low}, {high}] for value {value}")
        self.low = low
        self.high = high
        self.value = value


class StartAfterEndError(MoolahError):
    def __init__(self, start: date, end: date) -> None:
        super().__init__(f"start ({start.isoformat()}) cannot be after end ({end.isoformat()})")
        self.start = start
        self.end = end


class MonthDayOutOfRangeError(MoolahError):
    def __init__(self, day: int) -> None:
        super().__init__(f"month day `{day}` must be in range [1, 31]")
        self.day = day


class WeekdayOutOfRangeError(MoolahError):
    def __init__(self, weekday: int) -> None:
        super().__init__(f"weekday `{weekday}` must be in range [0, 6] (Monday is 0)")
        self.weekday = weekday


class DateUnreachableError(MoolahError):
    def __init__(self, target: str) -> None:
        super().__init__(f"date {target} is outside the supported calendar")
        self.target = target
