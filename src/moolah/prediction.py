from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from .calendar_math import shift_days
from .deltas import Delta
from .types import PredictionState

logger = logging.getLogger(__name__)


@dataclass
class AggregatedDelta:
    value: float = 0.0
    min_value: float = 0.0
    max_value: float = 0.0
    impactful_deltas: list[str] = field(default_factory=list)

    def update(self, delta: Delta) -> None:
        self.value += delta.value
        self.min_value += delta.min_value()
        self.max_value += delta.max_value()
        self.impactful_deltas.append(delta.name)


@dataclass(frozen=True)
class Prediction:
    name: str
    start: date
    initial_value: float
    deltas: tuple[Delta, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "deltas", tuple(self.deltas))

    def aggregate_deltas(self, end: date) -> dict[date, AggregatedDelta]:
        """Per-date totals of every delta landing in ``[start, end]``, ordered by date.

        The start date always has a bucket, even when nothing lands on it.
        """
        buckets: dict[date, AggregatedDelta] = {self.start: AggregatedDelta()}
        for delta in self.deltas:
            for day in delta.dates:
                if self.start <= day <= end:
                    buckets.setdefault(day, AggregatedDelta()).update(delta)
        return dict(sorted(buckets.items()))

    def predict(self, end: date) -> dict[date, PredictionState]:
        buckets = self.aggregate_deltas(end)

        value = min_value = max_value = self.initial_value
        states: dict[date, PredictionState] = {}
        for day, bucket in buckets.items():
            value += bucket.value
            min_value += bucket.min_value
            max_value += bucket.max_value
            # Only deltas landing on this exact day are reported, not everything seen so far.
            states[day] = PredictionState(
                value=value,
                min_value=min_value,
                max_value=max_value,
                impactful_deltas=frozenset(bucket.impactful_deltas),
            )

        logger.debug("prediction %r: %d states from %s to %s", self.name, len(states), self.start, end)
        return states

    def predict_days(self, days: int) -> dict[date, PredictionState]:
        return self.predict(shift_days(self.start, days))
