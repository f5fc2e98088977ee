"""Core typing contracts for SGDNet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from .matrix import Matrix
from .vector import Vector


@dataclass(frozen=True, eq=False)
class Example:
    """A single labelled training example.

    Compared and hashed by identity, since its vectors are mutable.
    """

    input: Vector
    target: Vector


@dataclass
class Gradients:
    """Per-layer weight and bias gradients, shaped like the parameters."""

    weights: List[Matrix]
    biases: List[Vector]

    @classmethod
    def zeros_like(cls, weights: List[Matrix], biases: List[Vector]) -> "Gradients":
        return cls(
            weights=[Matrix(w.rows, w.columns) for w in weights],
            biases=[Vector(b.size) for b in biases],
        )

    def add(self, other: "Gradients") -> "Gradients":
        return Gradients(
            weights=[a.add(b) for a, b in zip(self.weights, other.weights)],
            biases=[a.add(b) for a, b in zip(self.biases, other.biases)],
        )


@dataclass(frozen=True)
class Evaluation:
    """Outcome of classifying an evaluation set by argmax."""

    correct: int
    total: int
    loss: float = 0.0

    @property
    def accuracy(self) -> float:
        return self.correct / self.total if self.total else 0.0

    def as_metrics(self) -> Dict[str, float]:
        return {
            "correct": float(self.correct),
            "total": float(self.total),
            "accuracy": self.accuracy,
            "loss": self.loss,
        }


@dataclass
class TrainResult:
    """Summary returned by :meth:`sgdnet.training.network.NeuralNetwork.train`."""

    epochs: int = 0
    batches: int = 0
    stopped: bool = False
    history: List[Mapping[str, float]] = field(default_factory=list)


@dataclass(frozen=True)
class RunResult:
    """Summary returned by :func:`sgdnet.training.pipelines.run_pipeline`."""

    epochs: int
    metrics_path: str
    manifest_path: str
    weights_path: str = ""
    biases_path: str = ""
    checkpoint_path: str = ""
