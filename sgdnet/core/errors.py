"""Exception taxonomy for the linear-algebra and training layers."""

from __future__ import annotations


class SgdnetError(Exception):
    """Base class for every error raised by :mod:`sgdnet`."""


class ShapeMismatchError(SgdnetError, ValueError):
    """Operand dimensions are incompatible with the requested operation."""


class TypeMismatchError(SgdnetError, TypeError):
    """Operand is neither the expected container nor a numeric scalar."""


class InvalidRangeError(SgdnetError, ValueError):
    """Randomisation bounds are invalid (``max <= min`` or non-numeric)."""


class InvalidStructureError(SgdnetError, ValueError):
    """Layer-size specification or persisted parameters are malformed."""


__all__ = [
    "SgdnetError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "InvalidRangeError",
    "InvalidStructureError",
]
