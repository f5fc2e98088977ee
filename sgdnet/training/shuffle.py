"""Seeded shuffling and mini-batch partitioning."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


def fisher_yates(items: Sequence[T], rng: np.random.Generator) -> List[T]:
    """Return a uniformly shuffled copy of ``items``; the input is not touched."""

    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = int(rng.integers(0, i + 1))
        out[i], out[j] = out[j], out[i]
    return out


def partition(items: Sequence[T], batch_size: int) -> List[List[T]]:
    """Split ``items`` into contiguous batches; the last one may be short."""

    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    return [list(items[start:start + batch_size]) for start in range(0, len(items), batch_size)]


__all__ = ["fisher_yates", "partition"]
