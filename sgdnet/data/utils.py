"""Helpers turning array-like data into training examples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Sequence

import numpy as np

from ..core.errors import ShapeMismatchError
from ..core.types import Example
from ..core.vector import Vector


def one_hot(label: int, num_classes: int) -> Vector:
    """Return a ``num_classes`` vector with a single ``1.0`` at ``label``."""

    if not 0 <= int(label) < num_classes:
        raise ValueError(f"label {label} outside [0, {num_classes})")
    out = Vector(num_classes)
    out[int(label)] = 1.0
    return out


def make_examples(
    inputs: Iterable[Sequence[float]] | np.ndarray,
    targets: Iterable[Sequence[float]] | np.ndarray,
) -> List[Example]:
    """Pair input rows with target rows as :class:`Example` objects."""

    input_rows = [np.asarray(row, dtype=np.float64).reshape(-1).tolist() for row in inputs]
    target_rows = [np.asarray(row, dtype=np.float64).reshape(-1).tolist() for row in targets]
    if len(input_rows) != len(target_rows):
        raise ShapeMismatchError(
            f"Got {len(input_rows)} inputs but {len(target_rows)} targets"
        )
    return [
        Example(input=Vector.from_list(x), target=Vector.from_list(y))
        for x, y in zip(input_rows, target_rows)
    ]


def encode_labels(labels: np.ndarray, num_classes: int | None = None) -> np.ndarray:
    """One-hot encode integer ``labels``; 2-D arrays are returned unchanged."""

    labels = np.asarray(labels)
    if labels.ndim == 2:
        return labels.astype(np.float64)
    indices = labels.reshape(-1).astype(int)
    k = int(num_classes or (indices.max() + 1 if indices.size else 0))
    return np.eye(k, dtype=np.float64)[indices]


@dataclass(frozen=True)
class SplitIndices:
    """Indices for train/evaluation partitions."""

    train: np.ndarray
    eval: np.ndarray

    @property
    def sizes(self) -> Mapping[str, int]:
        return {"train": int(self.train.size), "eval": int(self.eval.size)}


def deterministic_split(n_samples: int, *, eval_split: float = 0.2, seed: int = 0) -> SplitIndices:
    """Return deterministic shuffled indices for the requested eval ratio."""

    if not 0 <= eval_split < 1:
        raise ValueError("eval_split must be in [0, 1)")
    rng = np.random.default_rng(seed)
    indices = np.arange(n_samples)
    rng.shuffle(indices)
    eval_size = int(round(n_samples * eval_split))
    eval_size = min(max(eval_size, 1 if eval_split > 0 else 0), n_samples)
    if n_samples - eval_size <= 0:
        raise ValueError("Not enough samples for the requested split")
    return SplitIndices(train=indices[eval_size:], eval=indices[:eval_size])


__all__ = ["one_hot", "make_examples", "encode_labels", "SplitIndices", "deterministic_split"]
