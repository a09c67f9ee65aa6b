"""Convenience random numbers drawn from one shared generator."""

from __future__ import annotations

import random as _random

_generator = _random.Random()


def seed(value) -> None:
    """Re-seed the shared generator so that draws become reproducible."""
    _generator.seed(value)


def random_unit() -> float:
    """A random float in ``[0, 1)``."""
    return _generator.random()


def random_between(low: float, high: float) -> float:
    """A random float in ``[low, high)``."""
    if high < low:
        raise ValueError(f"empty range: low={low!r} is above high={high!r}")
    if high == low:
        return low
    value = low + (high - low) * _generator.random()
    # Guard against rounding up to the excluded upper bound.
    return value if value < high else low


def random_below(high: float) -> float:
    """A random float in ``[0, high)``."""
    return random_between(0.0, high)


def random_int_between(low: int, high: int) -> int:
    """A random integer from ``low`` to ``high``, both included."""
    if high < low:
        raise ValueError(f"empty range: low={low!r} is above high={high!r}")
    return _generator.randint(low, high)


def random_int_below(high: int) -> int:
    """A random integer from 0 to ``high``, both included."""
    return random_int_between(0, high)