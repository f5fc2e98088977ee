"""Dataset harness: example construction and the dataset registry."""

from . import loaders  # noqa: F401  (registers built-in datasets)
from .loaders import gaussian_blobs, load_npz, xor
from .registry import DatasetSpec, available_datasets, get_dataset, register_dataset
from .utils import encode_labels, make_examples, one_hot

__all__ = [
    "DatasetSpec",
    "available_datasets",
    "encode_labels",
    "gaussian_blobs",
    "get_dataset",
    "load_npz",
    "make_examples",
    "one_hot",
    "register_dataset",
    "xor",
]
