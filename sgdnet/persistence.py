"""Saving and restoring learned network parameters.

Two formats are supported:

* ``weights.json`` / ``biases.json`` -- nested row-major arrays in the layout a
  browser classifier reads back (``{"rows", "columns", "values"}`` per weight
  matrix and ``{"size", "values"}`` per bias vector).
* a compressed NumPy checkpoint holding ``W{l}`` and ``B{l}`` arrays.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Tuple

import numpy as np

from .core.errors import InvalidStructureError
from .training.network import NeuralNetwork

WEIGHTS_FILE = "weights.json"
BIASES_FILE = "biases.json"


def save_json(network: NeuralNetwork, directory: str | Path) -> Tuple[str, str]:
    """Write ``weights.json`` and ``biases.json`` into ``directory``."""

    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    weights = [
        {"rows": W.rows, "columns": W.columns, "values": W.to_list()} for W in network.weights
    ]
    biases = [{"size": B.size, "values": B.to_list()} for B in network.biases]
    weights_path = directory / WEIGHTS_FILE
    biases_path = directory / BIASES_FILE
    weights_path.write_text(json.dumps(weights))
    biases_path.write_text(json.dumps(biases))
    return str(weights_path), str(biases_path)


def load_json(directory: str | Path, *, seed: int | None = None) -> NeuralNetwork:
    """Rebuild a network from the files written by :func:`save_json`."""

    directory = Path(directory)
    weights = json.loads((directory / WEIGHTS_FILE).read_text())
    biases = json.loads((directory / BIASES_FILE).read_text())
    matrices = []
    for idx, entry in enumerate(weights):
        values = entry["values"]
        if len(values) != entry["rows"] or any(len(row) != entry["columns"] for row in values):
            raise InvalidStructureError(
                f"W{idx} does not match its recorded shape ({entry['rows']}, {entry['columns']})"
            )
        matrices.append(values)
    vectors = []
    for idx, entry in enumerate(biases):
        if len(entry["values"]) != entry["size"]:
            raise InvalidStructureError(f"B{idx} does not match its recorded size {entry['size']}")
        vectors.append(entry["values"])
    return NeuralNetwork.from_parameters(matrices, vectors, seed=seed)


def save_checkpoint(network: NeuralNetwork, path: str | Path) -> str:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {}
    for idx, (W, B) in enumerate(zip(network.weights, network.biases)):
        payload[f"W{idx}"] = W.to_numpy()
        payload[f"B{idx}"] = B.to_numpy()
    with path.open("wb") as handle:
        np.savez_compressed(handle, **payload)
    return str(path)


def load_checkpoint(path: str | Path, *, seed: int | None = None) -> NeuralNetwork:
    with np.load(Path(path)) as archive:
        layers = sum(1 for key in archive.files if key.startswith("W"))
        weights = [archive[f"W{idx}"].tolist() for idx in range(layers)]
        biases = [archive[f"B{idx}"].tolist() for idx in range(layers)]
    return NeuralNetwork.from_parameters(weights, biases, seed=seed)


__all__ = ["save_json", "load_json", "save_checkpoint", "load_checkpoint"]
