"""Tagged operand variants accepted by the polymorphic ``multiply`` methods."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Union

from .errors import TypeMismatchError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .matrix import Matrix
    from .vector import Vector


@dataclass(frozen=True)
class Scalar:
    """A plain number scaling every element."""

    value: float
    kind: ClassVar[str] = "scalar"


@dataclass(frozen=True)
class VectorOperand:
    value: "Vector"
    kind: ClassVar[str] = "vector"


@dataclass(frozen=True)
class MatrixOperand:
    value: "Matrix"
    kind: ClassVar[str] = "matrix"


Operand = Union[Scalar, VectorOperand, MatrixOperand]


def is_number(value: object) -> bool:
    """Return ``True`` for real numbers, excluding booleans."""

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def as_operand(value: object) -> Operand:
    """Wrap ``value`` in its operand variant.

    Already-tagged operands pass through untouched. Anything that is not a
    :class:`~sgdnet.core.vector.Vector`, :class:`~sgdnet.core.matrix.Matrix`
    or real number raises :class:`TypeMismatchError`.
    """

    if isinstance(value, (Scalar, VectorOperand, MatrixOperand)):
        return value

    from .matrix import Matrix
    from .vector import Vector

    if isinstance(value, Vector):
        return VectorOperand(value)
    if isinstance(value, Matrix):
        return MatrixOperand(value)
    if is_number(value):
        return Scalar(float(value))
    raise TypeMismatchError(f"Unsupported operand type: {type(value).__name__}")


__all__ = ["Scalar", "VectorOperand", "MatrixOperand", "Operand", "as_operand", "is_number"]
