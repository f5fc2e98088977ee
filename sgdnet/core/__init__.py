"""Core numerical primitives for SGDNet."""

from . import activations, errors, operands, types
from .matrix import Matrix, dot
from .vector import Vector

__all__ = ["activations", "errors", "operands", "types", "Matrix", "Vector", "dot"]
