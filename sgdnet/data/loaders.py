"""Built-in datasets: XOR, Gaussian blobs and MNIST-style ``.npz`` archives."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

import numpy as np

from ..core.types import Example
from .registry import DatasetSpec, register_dataset
from .utils import deterministic_split, encode_labels, make_examples

_XOR_INPUTS = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
_XOR_LABELS = [0, 1, 1, 0]


def xor(one_hot: bool = True) -> List[Example]:
    """The four XOR examples.

    With ``one_hot`` the targets are 2-wide class vectors so argmax
    classification is meaningful; otherwise they are single 0/1 values.
    """

    if one_hot:
        targets = encode_labels(np.asarray(_XOR_LABELS), 2)
    else:
        targets = np.asarray(_XOR_LABELS, dtype=np.float64).reshape(-1, 1)
    return make_examples(_XOR_INPUTS, targets)


def gaussian_blobs(
    n: int = 150,
    centers: Sequence[Sequence[float]] = ((2.0, 2.0), (-2.0, -2.0), (2.0, -2.0)),
    spread: float = 0.5,
    seed: int = 0,
) -> tuple[np.ndarray, np.ndarray]:
    """Sample ``n`` points around ``centers``; returns inputs and one-hot targets."""

    rng = np.random.default_rng(seed)
    centers_arr = np.asarray(centers, dtype=np.float64)
    labels = np.arange(n) % len(centers_arr)
    inputs = centers_arr[labels] + spread * rng.standard_normal((n, centers_arr.shape[1]))
    return inputs, encode_labels(labels, len(centers_arr))


def load_npz(
    path: str | Path,
    *,
    split: str = "train",
    limit: int | None = None,
    num_classes: int | None = 10,
) -> List[Example]:
    """Read ``{split}_images`` / ``{split}_labels`` arrays from an ``.npz`` archive.

    Images are flattened per sample; integer labels are one-hot encoded.
    """

    with np.load(Path(path)) as archive:
        try:
            images = archive[f"{split}_images"]
            labels = archive[f"{split}_labels"]
        except KeyError as exc:
            raise KeyError(f"{path} has no {split!r} split: {exc}") from exc
    if limit is not None:
        images, labels = images[:limit], labels[:limit]
    images = images.reshape(images.shape[0], int(np.prod(images.shape[1:], dtype=int)))
    return make_examples(images, encode_labels(labels, num_classes))


def _xor_factory(one_hot: bool = True, repeat: int = 1, **_: object) -> DatasetSpec:
    examples = xor(one_hot=one_hot)
    return DatasetSpec(
        name="xor",
        train=examples * max(1, int(repeat)),
        eval=list(examples),
        d_in=2,
        d_out=2 if one_hot else 1,
        provenance={"type": "xor", "one_hot": one_hot, "repeat": repeat},
    )


def _blobs_factory(
    n: int = 150,
    centers: Sequence[Sequence[float]] = ((2.0, 2.0), (-2.0, -2.0), (2.0, -2.0)),
    spread: float = 0.5,
    seed: int = 0,
    eval_split: float = 0.2,
    **_: object,
) -> DatasetSpec:
    inputs, targets = gaussian_blobs(n=n, centers=centers, spread=spread, seed=seed)
    split = deterministic_split(n, eval_split=eval_split, seed=seed)
    return DatasetSpec(
        name="blobs",
        train=make_examples(inputs[split.train], targets[split.train]),
        eval=make_examples(inputs[split.eval], targets[split.eval]),
        d_in=int(inputs.shape[1]),
        d_out=int(targets.shape[1]),
        provenance={
            "type": "blobs",
            "n": n,
            "centers": [list(c) for c in centers],
            "spread": spread,
            "seed": seed,
            "eval_split": eval_split,
        },
    )


def _npz_factory(
    path: str,
    train_limit: int | None = None,
    eval_limit: int | None = None,
    eval_split: str = "test",
    num_classes: int | None = 10,
    **_: object,
) -> DatasetSpec:
    train = load_npz(path, split="train", limit=train_limit, num_classes=num_classes)
    if not train:
        raise ValueError(f"{path} holds no training samples")
    evaluation = load_npz(path, split=eval_split, limit=eval_limit, num_classes=num_classes)
    return DatasetSpec(
        name="npz",
        train=train,
        eval=evaluation,
        d_in=train[0].input.size,
        d_out=train[0].target.size,
        provenance={
            "type": "npz",
            "path": str(path),
            "train_limit": train_limit,
            "eval_limit": eval_limit,
            "eval_split": eval_split,
        },
    )


register_dataset("xor", _xor_factory)
register_dataset("blobs", _blobs_factory)
register_dataset("npz", _npz_factory)

__all__ = ["xor", "gaussian_blobs", "load_npz"]
