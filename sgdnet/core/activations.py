"""Activation, cost and classification helpers for the training engine."""

from __future__ import annotations

import math
from typing import Sequence

from .vector import Vector


def sigmoid(a: float) -> float:
    """Return ``1 / (1 + e^-a)`` without overflowing for large ``|a|``."""

    if a >= 0:
        return 1.0 / (1.0 + math.exp(-a))
    e = math.exp(a)
    return e / (1.0 + e)


def sigmoid_prime(a: float) -> float:
    """Derivative of :func:`sigmoid` with respect to ``a``."""

    s = sigmoid(a)
    return s * (1.0 - s)


def cost(output: Vector, target: Vector) -> float:
    """Quadratic cost ``0.5 * ||output - target||^2``."""

    diff = output.subtract(target)
    return 0.5 * sum(value * value for value in diff)


def cost_derivative(output: Vector, target: Vector) -> Vector:
    """Gradient of :func:`cost` with respect to ``output``."""

    return output.subtract(target)


def index_of_max(values: Sequence[float]) -> int:
    """Index of the largest value (first on ties), ``-1`` when empty."""

    if len(values) == 0:
        return -1
    best = 0
    for idx in range(1, len(values)):
        if values[idx] > values[best]:
            best = idx
    return best
