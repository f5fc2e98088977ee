"""Classifier front-end for networks with persisted parameters."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .core.activations import index_of_max
from .core.vector import Vector
from .persistence import load_json
from .training.network import NeuralNetwork


class Classifier:
    """Predict the argmax class of one input vector."""

    def __init__(self, network: NeuralNetwork) -> None:
        self.network = network

    @classmethod
    def from_directory(cls, directory: str | Path) -> "Classifier":
        return cls(load_json(directory))

    @property
    def input_size(self) -> int:
        return self.network.structure[0]

    def probabilities(self, values: Vector | Sequence[float]) -> Vector:
        inputs = values if isinstance(values, Vector) else Vector.from_list(values)
        return self.network.forward_pass(inputs)

    def predict(self, values: Vector | Sequence[float]) -> int:
        return index_of_max(self.probabilities(values).values)


__all__ = ["Classifier"]
