"""Fixed-size numeric vectors implemented on plain Python lists."""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Callable, Iterable, Iterator, List

import numpy as np

from .errors import ShapeMismatchError, TypeMismatchError
from .operands import Operand, as_operand, is_number
from .rng import make_rng, uniform_values

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .matrix import Matrix


def _check_size(size: object) -> int:
    if not isinstance(size, numbers.Integral) or isinstance(size, bool):
        raise TypeMismatchError(f"Vector size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ShapeMismatchError(f"Vector size must be >= 0, got {size}")
    return int(size)


class Vector:
    """Ordered sequence of floats whose length is fixed at construction.

    Arithmetic never changes the receiver's length: ``add``, ``subtract``,
    ``multiply`` and ``map`` return new vectors, while ``apply`` and
    ``randomize`` overwrite the elements in place.
    """

    __slots__ = ("_size", "_values")

    def __init__(self, size: int) -> None:
        self._size = _check_size(size)
        self._values: List[float] = [0.0] * self._size

    @classmethod
    def from_list(cls, values: Iterable[float]) -> "Vector":
        """Copy ``values`` (any iterable of real numbers) into a new vector."""

        items = list(values)
        for item in items:
            if not is_number(item):
                raise TypeMismatchError(
                    f"Vector elements must be numbers, got {type(item).__name__}"
                )
        vector = cls(len(items))
        vector._values = [float(item) for item in items]
        return vector

    # ------------------------------------------------------------------
    # Container protocol

    @property
    def size(self) -> int:
        return self._size

    @property
    def values(self) -> List[float]:
        return self._values

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]

    def __setitem__(self, index: int, value: float) -> None:
        if not is_number(value):
            raise TypeMismatchError(f"Vector elements must be numbers, got {type(value).__name__}")
        self._values[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"

    def has_size(self, size: int) -> bool:
        return self._size == size

    def copy(self) -> "Vector":
        return Vector.from_list(self._values)

    def to_list(self) -> List[float]:
        return list(self._values)

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self._values, dtype=np.float64)

    # ------------------------------------------------------------------
    # Arithmetic

    def _require_same_size(self, other: object, op: str) -> "Vector":
        if not isinstance(other, Vector):
            raise TypeMismatchError(f"Cannot {op} {type(other).__name__} and Vector")
        if other._size != self._size:
            raise ShapeMismatchError(
                f"Cannot {op} vectors of size {self._size} and {other._size}"
            )
        return other

    def _from_values(self, values: List[float]) -> "Vector":
        out = Vector(self._size)
        out._values = values
        return out

    def add(self, other: "Vector") -> "Vector":
        other = self._require_same_size(other, "add")
        return self._from_values([a + b for a, b in zip(self._values, other._values)])

    def subtract(self, other: "Vector") -> "Vector":
        other = self._require_same_size(other, "subtract")
        return self._from_values([a - b for a, b in zip(self._values, other._values)])

    def multiply(self, other: "Vector | float | Operand") -> "Vector":
        """Element-wise product with a vector, or scaling by a scalar."""

        operand = as_operand(other)
        if operand.kind == "scalar":
            factor = operand.value
            return self._from_values([value * factor for value in self._values])
        if operand.kind == "vector":
            vector = self._require_same_size(operand.value, "multiply")
            return self._from_values([a * b for a, b in zip(self._values, vector._values)])
        raise TypeMismatchError("Vector can only be multiplied by a Vector or a scalar")

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    @staticmethod
    def outer_product(v1: "Vector", v2: "Vector") -> "Matrix":
        """Return the ``(v1.size, v2.size)`` matrix ``result[i][j] = v1[i] * v2[j]``."""

        from .matrix import Matrix

        if not isinstance(v1, Vector) or not isinstance(v2, Vector):
            raise TypeMismatchError("outer_product expects two Vector operands")
        product = Matrix(v1.size, v2.size)
        product._values = [[a * b for b in v2._values] for a in v1._values]
        return product

    # ------------------------------------------------------------------
    # Element-wise transforms

    def map(self, func: Callable[[float], float]) -> "Vector":
        return self._from_values([float(func(value)) for value in self._values])

    def apply(self, func: Callable[[float], float]) -> "Vector":
        """Apply ``func`` to every element in place and return ``self``."""

        self._values = [float(func(value)) for value in self._values]
        return self

    def randomize(
        self,
        min: float = 0.0,
        max: float = 1.0,
        integer_only: bool = False,
        *,
        rng: np.random.Generator | None = None,
    ) -> "Vector":
        """Fill every element uniformly from ``[min, max]``; ``max <= min`` is invalid."""

        generator = rng if rng is not None else make_rng()
        self._values = uniform_values(generator, min, max, self._size, integer_only)
        return self


__all__ = ["Vector"]
