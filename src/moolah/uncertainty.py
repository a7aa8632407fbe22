from __future__ import annotations

from .errors import IllogicalBoundsError
from .types import Balanced, Bounds, Dollars, Percent, Unbalanced, Uncertainty, UncertaintyType


def check_bounds(value: float, uncertainty: Uncertainty | None) -> None:
    if not isinstance(uncertainty, Bounds):
        return
    if not (uncertainty.low <= value <= uncertainty.high):
        raise IllogicalBoundsError(uncertainty.low, uncertainty.high, value)


def _spread(value: float, spread: UncertaintyType) -> float:
    if isinstance(spread, Dollars):
        return spread.amount
    if isinstance(spread, Percent):
        return spread.amount / 100.0 * abs(value)
    raise TypeError(f"Unsupported uncertainty type: {type(spread).__name__}")


def max_bound(value: float, uncertainty: Uncertainty | None) -> float:
    if uncertainty is None:
        return value
    if isinstance(uncertainty, Balanced):
        return value + _spread(value, uncertainty.spread)
    if isinstance(uncertainty, Unbalanced):
        return value + _spread(value, uncertainty.high)
    if isinstance(uncertainty, Bounds):
        return uncertainty.high
    raise TypeError(f"Unsupported uncertainty: {type(uncertainty).__name__}")


def min_bound(value: float, uncertainty: Uncertainty | None) -> float:
    if uncertainty is None:
        return value
    if isinstance(uncertainty, Balanced):
        return value - _spread(value, uncertainty.spread)
    if isinstance(uncertainty, Unbalanced):
        return value - _spread(value, uncertainty.low)
    if isinstance(uncertainty, Bounds):
        return uncertainty.low
    raise TypeError(f"Unsupported uncertainty: {type(uncertainty).__name__}")
