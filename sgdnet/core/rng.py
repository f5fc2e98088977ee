"""Random-source helpers shared by containers, networks and shuffling."""

from __future__ import annotations

import math
from typing import List

import numpy as np

from .errors import InvalidRangeError
from .operands import is_number


def make_rng(seed: int | np.random.Generator | None = None) -> np.random.Generator:
    """Return ``seed`` if it already is a generator, else a fresh seeded one."""

    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def check_bounds(low: float, high: float) -> None:
    if not (is_number(low) and is_number(high)) or math.isnan(low) or math.isnan(high):
        raise InvalidRangeError(f"Expected two numbers, got min={low!r}, max={high!r}")
    if high <= low:
        raise InvalidRangeError(f"Expected max > min, got min={low}, max={high}")


def uniform_values(
    rng: np.random.Generator,
    low: float,
    high: float,
    count: int,
    integer_only: bool = False,
) -> List[float]:
    """Draw ``count`` independent values uniformly from ``[low, high]``."""

    check_bounds(low, high)
    if integer_only:
        lo, hi = math.ceil(low), math.floor(high)
        if hi < lo:
            raise InvalidRangeError(f"No integers lie in [{low}, {high}]")
        return [float(v) for v in rng.integers(lo, hi, size=count, endpoint=True)]
    return [float(v) for v in rng.uniform(low, high, size=count)]


__all__ = ["make_rng", "check_bounds", "uniform_values"]
