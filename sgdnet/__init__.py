"""SGDNet public API."""

from .core import activations, errors, types  # noqa: F401
from .core.errors import (
    InvalidRangeError,
    InvalidStructureError,
    SgdnetError,
    ShapeMismatchError,
    TypeMismatchError,
)
from .core.matrix import Matrix
from .core.operands import MatrixOperand, Scalar, VectorOperand
from .core.types import Evaluation, Example, Gradients, TrainResult
from .core.vector import Vector
from .data import get_dataset, make_examples
from .inference import Classifier
from .persistence import load_checkpoint, load_json, save_checkpoint, save_json
from .training.network import NeuralNetwork
from .training.pipelines import load_preset, presets, run_pipeline

__all__ = [
    "Classifier",
    "Evaluation",
    "Example",
    "Gradients",
    "InvalidRangeError",
    "InvalidStructureError",
    "Matrix",
    "MatrixOperand",
    "NeuralNetwork",
    "Scalar",
    "SgdnetError",
    "ShapeMismatchError",
    "TrainResult",
    "TypeMismatchError",
    "Vector",
    "VectorOperand",
    "activations",
    "errors",
    "get_dataset",
    "load_checkpoint",
    "load_json",
    "load_preset",
    "make_examples",
    "presets",
    "run_pipeline",
    "save_checkpoint",
    "save_json",
    "types",
]
