from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import NegativeValueError


@dataclass(frozen=True)
class PositiveValue:
    value: float

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeValueError(self.value)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True)
class Dollars:
    """Absolute spread, in the same unit as the delta value."""

    amount: float

    def __post_init__(self) -> None:
        PositiveValue(self.amount)


@dataclass(frozen=True)
class Percent:
    """Spread relative to the magnitude of the delta value (3.0 means 3%)."""

    amount: float

    def __post_init__(self) -> None:
        PositiveValue(self.amount)


UncertaintyType = Union[Dollars, Percent]


@dataclass(frozen=True)
class Balanced:
    spread: UncertaintyType


@dataclass(frozen=True)
class Unbalanced:
    low: UncertaintyType
    high: UncertaintyType


@dataclass(frozen=True)
class Bounds:
    low: float
    high: float


Uncertainty = Union[Balanced, Unbalanced, Bounds]


@dataclass(frozen=True)
class PredictionState:
    value: float
    min_value: float
    max_value: float
    impactful_deltas: frozenset[str] = frozenset()
