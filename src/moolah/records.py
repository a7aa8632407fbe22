"""Declarative scenario records and their conversion into deltas.

A scenario file is JSON holding the prediction start, its initial value and a
list of delta records. Structural problems surface as pydantic
``ValidationError``; values that a delta rejects (negative spreads, reversed
ranges, bad month days) surface as the typed ``MoolahError`` subclasses.
"""
from __future__ import annotations

import calendar
import json
from datetime import date
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .deltas import CustomDelta, DailyDelta, Delta, MonthlyDelta, OneTimeDelta, WeeklyDelta, YearlyDelta
from .prediction import Prediction
from .types import Balanced, Bounds, Dollars, Percent, Unbalanced, Uncertainty, UncertaintyType

WEEKDAY_NAMES = {name.lower(): number for number, name in enumerate(calendar.day_name)}


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid")


class SpreadRecord(_Record):
    dollars: float | None = None
    percent: float | None = None

    @model_validator(mode="after")
    def _exactly_one_unit(self) -> "SpreadRecord":
        if (self.dollars is None) == (self.percent is None):
            raise ValueError("exactly one of `dollars` or `percent` is required")
        return self

    def to_type(self) -> UncertaintyType:
        if self.dollars is not None:
            return Dollars(self.dollars)
        return Percent(self.percent)


class BalancedRecord(SpreadRecord):
    kind: Literal["balanced"]

    def to_uncertainty(self) -> Uncertainty:
        return Balanced(self.to_type())


class UnbalancedRecord(_Record):
    kind: Literal["unbalanced"]
    low: SpreadRecord
    high: SpreadRecord

    def to_uncertainty(self) -> Uncertainty:
        return Unbalanced(low=self.low.to_type(), high=self.high.to_type())


class BoundsRecord(_Record):
    kind: Literal["bounds"]
    low: float
    high: float

    def to_uncertainty(self) -> Uncertainty:
        return Bounds(low=self.low, high=self.high)


UncertaintyRecord = Annotated[
    Union[BalancedRecord, UnbalancedRecord, BoundsRecord],
    Field(discriminator="kind"),
]


class OnceRepetition(_Record):
    kind: Literal["once"]
    on: date

    def build(self, name: str, value: float, uncertainty: Uncertainty | None) -> Delta:
        return OneTimeDelta(name=name, value=value, on=self.on, uncertainty=uncertainty)


class CustomRepetition(_Record):
    kind: Literal["custom"]
    dates: list[date] = Field(default_factory=list)

    def build(self, name: str, value: float, uncertainty: Uncertainty | None) -> Delta:
        return CustomDelta(name=name, value=value, on_dates=tuple(self.dates), uncertainty=uncertainty)


class DailyRepetition(_Record):
    kind: Literal["daily"]
    start: date
    end: date
    skip: int = 0

    def build(self, name: str, value: float, uncertainty: Uncertainty | None) -> Delta:
        return DailyDelta(
            name=name, value=value, start=self.start, end=self.end, uncertainty=uncertainty, skip_days=self.skip
        )


class WeeklyRepetition(_Record):
    kind: Literal["weekly"]
    start: date
    end: date
    on_weekday: int | None = None
    skip: int = 0

    @field_validator("on_weekday", mode="before")
    @classmethod
    def _weekday_name(cls, v: object) -> object:
        if isinstance(v, str) and v.strip().lower() in WEEKDAY_NAMES:
            return WEEKDAY_NAMES[v.strip().lower()]
        return v

    def build(self, name: str, value: float, uncertainty: Uncertainty | None) -> Delta:
        return WeeklyDelta(
            name=name,
            value=value,
            start=self.start,
            end=self.end,
            uncertainty=uncertainty,
            on_weekday=self.on_weekday,
            skip_weeks=self.skip,
        )


class MonthlyRepetition(_Record):
    kind: Literal["monthly"]
    start: date
    end: date
    on_month_day: int
    skip: int = 0

    def build(self, name: str, value: float, uncertainty: Uncertainty | None) -> Delta:
        return MonthlyDelta(
            name=name,
            value=value,
            start=self.start,
            end=self.end,
            on_month_day=self.on_month_day,
            uncertainty=uncertainty,
            skip_months=self.skip,
        )


class YearlyRepetition(_Record):
    kind: Literal["yearly"]
    start: date
    end: date
    skip: int = 0

    def build(self, name: str, value: float, uncertainty: Uncertainty | None) -> Delta:
        return YearlyDelta(
            name=name, value=value, start=self.start, end=self.end, uncertainty=uncertainty, skip_years=self.skip
        )


RepetitionRecord = Annotated[
    Union[OnceRepetition, CustomRepetition, DailyRepetition, WeeklyRepetition, MonthlyRepetition, YearlyRepetition],
    Field(discriminator="kind"),
]


class DeltaRecord(_Record):
    name: str
    value: float
    uncertainty: UncertaintyRecord | None = None
    repetition: RepetitionRecord

    def to_delta(self) -> Delta:
        uncertainty = self.uncertainty.to_uncertainty() if self.uncertainty is not None else None
        return self.repetition.build(self.name, self.value, uncertainty)


class ScenarioRecord(_Record):
    name: str = ""
    start: date
    initial_value: float = 0.0
    deltas: list[DeltaRecord] = Field(default_factory=list)

    def to_prediction(self) -> Prediction:
        return Prediction(
            name=self.name,
            start=self.start,
            initial_value=self.initial_value,
            deltas=tuple(record.to_delta() for record in self.deltas),
        )


def load_scenario(path: str) -> Prediction:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Scenario file not found: {path}")

    payload = json.loads(p.read_text(encoding="utf-8"))
    return ScenarioRecord.model_validate(payload).to_prediction()
