"""Dense row-major matrices implemented on nested Python lists."""

from __future__ import annotations

import numbers
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .errors import ShapeMismatchError, TypeMismatchError
from .operands import Operand, as_operand, is_number
from .rng import make_rng, uniform_values
from .vector import Vector


def dot(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Inner product of two equal-length numeric sequences."""

    if len(xs) != len(ys):
        raise ShapeMismatchError(f"dot() needs equal lengths, got {len(xs)} and {len(ys)}")
    total = 0.0
    for x, y in zip(xs, ys):
        total += x * y
    return total


def _check_dim(name: str, value: object) -> int:
    if not isinstance(value, numbers.Integral) or isinstance(value, bool):
        raise TypeMismatchError(f"Matrix {name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ShapeMismatchError(f"Matrix {name} must be >= 0, got {value}")
    return int(value)


class Matrix:
    """A ``rows x columns`` grid of floats.

    Every operation returns a new matrix; ``transpose`` included. The only
    in-place operation is :meth:`randomize`.
    """

    __slots__ = ("_rows", "_columns", "_values")

    def __init__(self, rows: int, columns: int | None = None) -> None:
        self._rows = _check_dim("rows", rows)
        self._columns = self._rows if columns is None else _check_dim("columns", columns)
        self._values: List[List[float]] = [[0.0] * self._columns for _ in range(self._rows)]

    @classmethod
    def from_list(cls, rows: Iterable[Iterable[float]]) -> "Matrix":
        """Build a matrix from nested rows, all of which must share one length."""

        grid = [list(row) for row in rows]
        columns = len(grid[0]) if grid else 0
        for idx, row in enumerate(grid):
            if len(row) != columns:
                raise ShapeMismatchError(
                    f"Row {idx} has {len(row)} elements, expected {columns}"
                )
            for item in row:
                if not is_number(item):
                    raise TypeMismatchError(
                        f"Matrix elements must be numbers, got {type(item).__name__}"
                    )
        matrix = cls(len(grid), columns)
        matrix._values = [[float(item) for item in row] for row in grid]
        return matrix

    # ------------------------------------------------------------------
    # Shape and access

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    @property
    def values(self) -> List[List[float]]:
        return self._values

    def has_dimension(self, rows: int, columns: int) -> bool:
        return self._rows == rows and self._columns == columns

    def __getitem__(self, index: int) -> List[float]:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._values == other._values

    def __repr__(self) -> str:
        return f"Matrix({self._values!r})"

    def copy(self) -> "Matrix":
        return self._from_values([list(row) for row in self._values], self._rows, self._columns)

    def to_list(self) -> List[List[float]]:
        return [list(row) for row in self._values]

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self._values, dtype=np.float64).reshape(self._rows, self._columns)

    @staticmethod
    def _from_values(values: List[List[float]], rows: int, columns: int) -> "Matrix":
        out = Matrix(rows, columns)
        out._values = values
        return out

    # ------------------------------------------------------------------
    # Element-wise arithmetic

    def _require_same_shape(self, other: object, op: str) -> "Matrix":
        if not isinstance(other, Matrix):
            raise TypeMismatchError(f"Cannot {op} {type(other).__name__} and Matrix")
        if other.shape != self.shape:
            raise ShapeMismatchError(
                f"Cannot {op} matrices of shape {self.shape} and {other.shape}"
            )
        return other

    def _zip_with(self, other: "Matrix", func) -> "Matrix":
        values = [
            [func(a, b) for a, b in zip(row, other_row)]
            for row, other_row in zip(self._values, other._values)
        ]
        return self._from_values(values, self._rows, self._columns)

    def add(self, other: "Matrix") -> "Matrix":
        other = self._require_same_shape(other, "add")
        return self._zip_with(other, lambda a, b: a + b)

    def subtract(self, other: "Matrix") -> "Matrix":
        other = self._require_same_shape(other, "subtract")
        return self._zip_with(other, lambda a, b: a - b)

    def hadamard(self, other: "Matrix") -> "Matrix":
        other = self._require_same_shape(other, "hadamard")
        return self._zip_with(other, lambda a, b: a * b)

    # ------------------------------------------------------------------
    # Products

    def multiply(self, other: "Matrix | Vector | float | Operand") -> "Matrix | Vector":
        """Matrix product, matrix-vector product or scalar scaling.

        The operand is tagged once by :func:`~sgdnet.core.operands.as_operand`
        and dispatched on its kind:

        * matrix -- requires ``self.columns == other.rows``; returns a
          ``(self.rows, other.columns)`` matrix.
        * vector -- treated as a column; requires ``self.columns == other.size``;
          returns a vector of size ``self.rows``.
        * scalar -- every element scaled.
        """

        operand = as_operand(other)
        handler = {
            "matrix": self._multiply_matrix,
            "vector": self._multiply_vector,
            "scalar": self._scale,
        }[operand.kind]
        return handler(operand.value)

    __matmul__ = multiply

    def _multiply_matrix(self, other: "Matrix") -> "Matrix":
        if self._columns != other._rows:
            raise ShapeMismatchError(
                f"Cannot multiply {self.shape} by {other.shape}: "
                f"{self._columns} columns vs {other._rows} rows"
            )
        other_columns = other.transpose()._values
        values = [[dot(row, column) for column in other_columns] for row in self._values]
        return self._from_values(values, self._rows, other._columns)

    def _multiply_vector(self, vector: Vector) -> Vector:
        if self._columns != vector.size:
            raise ShapeMismatchError(
                f"Cannot multiply {self.shape} matrix by vector of size {vector.size}"
            )
        return Vector.from_list([dot(row, vector.values) for row in self._values])

    def _scale(self, factor: float) -> "Matrix":
        values = [[value * factor for value in row] for row in self._values]
        return self._from_values(values, self._rows, self._columns)

    def transpose(self) -> "Matrix":
        """Return a new ``(columns, rows)`` matrix; ``self`` is left untouched."""

        values = [list(column) for column in zip(*self._values)]
        if not values:
            values = [[] for _ in range(self._columns)]
        return self._from_values(values, self._columns, self._rows)

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    # ------------------------------------------------------------------
    # Randomisation

    def randomize(
        self,
        min: float = 0.0,
        max: float = 1.0,
        integer_only: bool = False,
        *,
        rng: np.random.Generator | None = None,
    ) -> "Matrix":
        """Fill every element uniformly from ``[min, max]``; ``max <= min`` is invalid."""

        generator = rng if rng is not None else make_rng()
        flat = uniform_values(generator, min, max, self._rows * self._columns, integer_only)
        cols = self._columns
        self._values = [flat[r * cols:(r + 1) * cols] for r in range(self._rows)]
        return self


__all__ = ["Matrix", "dot"]
