"""Feed-forward sigmoid network trained by mini-batch stochastic gradient descent."""

from __future__ import annotations

import numbers
from typing import Callable, Iterable, List, Mapping, Sequence, Tuple

import numpy as np

from ..core.activations import cost, cost_derivative, index_of_max, sigmoid, sigmoid_prime
from ..core.errors import InvalidStructureError, ShapeMismatchError
from ..core.matrix import Matrix
from ..core.rng import make_rng
from ..core.types import Evaluation, Example, Gradients, TrainResult
from ..core.vector import Vector
from .shuffle import fisher_yates, partition


def _validate_structure(structure: object) -> List[int]:
    if isinstance(structure, np.ndarray):
        structure = structure.tolist()
    if isinstance(structure, (str, bytes)) or not isinstance(structure, Sequence):
        raise InvalidStructureError(
            f"Structure must be a sequence of layer widths, got {type(structure).__name__}"
        )
    if len(structure) < 2:
        raise InvalidStructureError(
            f"Structure needs at least an input and an output layer, got {list(structure)}"
        )
    widths: List[int] = []
    for idx, width in enumerate(structure):
        if not isinstance(width, numbers.Integral) or isinstance(width, bool) or width < 1:
            raise InvalidStructureError(
                f"Layer {idx} width must be a positive integer, got {width!r}"
            )
        widths.append(int(width))
    return widths


def _unpack(example: object) -> Tuple[Vector, Vector]:
    if isinstance(example, Example):
        return example.input, example.target
    inputs, target = example  # type: ignore[misc]
    return inputs, target


class NeuralNetwork:
    """Dense sigmoid network with per-layer weights ``W[l]`` and biases ``B[l]``.

    ``W[l]`` has shape ``(structure[l + 1], structure[l])`` and ``B[l]`` has size
    ``structure[l + 1]``. Both are rebound (never resized) by every call to
    :meth:`accumulate_batch`; they are the only state the network carries
    besides its random generator.
    """

    def __init__(
        self,
        structure: Sequence[int],
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        init_range: Tuple[float, float] = (-1.0, 1.0),
    ) -> None:
        self.structure = _validate_structure(structure)
        self.rng = rng if rng is not None else make_rng(seed)
        low, high = init_range
        self.weights: List[Matrix] = []
        self.biases: List[Vector] = []
        for n_in, n_out in zip(self.structure[:-1], self.structure[1:]):
            self.weights.append(Matrix(n_out, n_in).randomize(low, high, rng=self.rng))
            self.biases.append(Vector(n_out).randomize(low, high, rng=self.rng))

    @classmethod
    def from_parameters(
        cls,
        weights: Sequence[Matrix | Sequence[Sequence[float]]],
        biases: Sequence[Vector | Sequence[float]],
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> "NeuralNetwork":
        """Rebuild a network from explicit parameters, validating the shape chain."""

        mats = [w.copy() if isinstance(w, Matrix) else Matrix.from_list(w) for w in weights]
        vecs = [b.copy() if isinstance(b, Vector) else Vector.from_list(b) for b in biases]
        if not mats or len(mats) != len(vecs):
            raise InvalidStructureError(
                f"Expected matching non-empty weight/bias lists, got {len(mats)} and {len(vecs)}"
            )
        structure = [mats[0].columns]
        for idx, (W, B) in enumerate(zip(mats, vecs)):
            if W.columns != structure[-1]:
                raise InvalidStructureError(
                    f"W{idx} has {W.columns} columns but the previous layer has {structure[-1]} units"
                )
            if B.size != W.rows:
                raise InvalidStructureError(f"B{idx} has size {B.size}, expected {W.rows}")
            structure.append(W.rows)

        network = cls.__new__(cls)
        network.structure = _validate_structure(structure)
        network.rng = rng if rng is not None else make_rng(seed)
        network.weights = mats
        network.biases = vecs
        return network

    @property
    def layers(self) -> int:
        return len(self.structure)

    def parameter_count(self) -> int:
        return sum(W.rows * W.columns + B.size for W, B in zip(self.weights, self.biases))

    # ------------------------------------------------------------------
    # Inference

    def forward_pass(self, inputs: Vector) -> Vector:
        """Return the output activation ``sigmoid(W[l] . a + B[l])`` of the last layer."""

        activation = inputs
        for W, B in zip(self.weights, self.biases):
            activation = W.multiply(activation).add(B).apply(sigmoid)
        return activation

    def predict(self, inputs: Vector) -> int:
        return index_of_max(self.forward_pass(inputs).values)

    # ------------------------------------------------------------------
    # Gradients

    def backpropagate(self, inputs: Vector, target: Vector) -> Gradients:
        """Gradient of the quadratic cost for one example."""

        gradients, _ = self._backward(inputs, target)
        return gradients

    def _backward(self, inputs: Vector, target: Vector) -> Tuple[Gradients, float]:
        activations: List[Vector] = [inputs]
        zs: List[Vector] = []
        for W, B in zip(self.weights, self.biases):
            z = W.multiply(activations[-1]).add(B)
            zs.append(z)
            activations.append(z.map(sigmoid))

        last = len(self.weights) - 1
        grad_w: List[Matrix] = [None] * len(self.weights)  # type: ignore[list-item]
        grad_b: List[Vector] = [None] * len(self.biases)  # type: ignore[list-item]

        delta = cost_derivative(activations[-1], target).multiply(zs[last].map(sigmoid_prime))
        grad_b[last] = delta
        grad_w[last] = Vector.outer_product(delta, activations[last])

        for l in range(last, 0, -1):
            delta = (
                self.weights[l].transpose().multiply(delta).multiply(zs[l - 1].map(sigmoid_prime))
            )
            grad_b[l - 1] = delta
            grad_w[l - 1] = Vector.outer_product(delta, activations[l - 1])

        return Gradients(weights=grad_w, biases=grad_b), cost(activations[-1], target)

    # ------------------------------------------------------------------
    # Training

    def accumulate_batch(self, batch: Sequence[object], step_size: float) -> Gradients:
        """Sum per-example gradients, then apply a single averaged SGD update.

        Returns the summed gradients. An empty batch leaves the parameters
        untouched.
        """

        total, _ = self._accumulate(batch, step_size)
        return total

    def _accumulate(self, batch: Sequence[object], step_size: float) -> Tuple[Gradients, float]:
        total = Gradients.zeros_like(self.weights, self.biases)
        if not batch:
            return total, 0.0
        batch_cost = 0.0
        for example in batch:
            inputs, target = _unpack(example)
            gradients, example_cost = self._backward(inputs, target)
            total = total.add(gradients)
            batch_cost += example_cost

        scale = step_size / len(batch)
        self.weights = [W.subtract(gW.multiply(scale)) for W, gW in zip(self.weights, total.weights)]
        self.biases = [B.subtract(gB.multiply(scale)) for B, gB in zip(self.biases, total.biases)]
        return total, batch_cost

    def train(
        self,
        examples: Sequence[object],
        batch_size: int,
        epochs: int,
        step_size: float,
        eval_set: Sequence[object] | None = None,
        *,
        callbacks: Iterable[object] = (),
        should_stop: Callable[[], bool] | None = None,
    ) -> TrainResult:
        """Run ``epochs`` passes of shuffled mini-batch SGD over ``examples``.

        ``examples`` is shuffled as a copy each epoch. After every completed
        epoch a metrics mapping is passed to each callback's ``on_epoch`` (or to
        the callback itself when it is a plain callable). ``should_stop`` is
        polled before every batch; once it returns ``True`` the run ends
        without finishing the current epoch.
        """

        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        if epochs < 0:
            raise ValueError(f"epochs must be >= 0, got {epochs}")
        callbacks = list(callbacks)
        result = TrainResult()

        for epoch in range(1, epochs + 1):
            epoch_cost = 0.0
            for batch in partition(fisher_yates(examples, self.rng), batch_size):
                if should_stop is not None and should_stop():
                    result.stopped = True
                    return result
                _, batch_cost = self._accumulate(batch, step_size)
                epoch_cost += batch_cost
                result.batches += 1

            metrics = {"loss": epoch_cost / len(examples) if examples else 0.0}
            if eval_set is not None:
                evaluation = self.evaluate(eval_set)
                metrics.update({f"eval_{k}": v for k, v in evaluation.as_metrics().items()})
            result.epochs = epoch
            result.history.append(metrics)
            self._emit_epoch(callbacks, epoch, metrics)
        return result

    def evaluate(self, eval_set: Sequence[object]) -> Evaluation:
        """Count examples whose output argmax matches the target argmax."""

        correct = 0
        total_cost = 0.0
        for example in eval_set:
            inputs, target = _unpack(example)
            output = self.forward_pass(inputs)
            total_cost += cost(output, target)
            if index_of_max(output.values) == index_of_max(target.values):
                correct += 1
        total = len(eval_set)
        return Evaluation(correct=correct, total=total, loss=total_cost / total if total else 0.0)

    @staticmethod
    def _emit_epoch(callbacks: Sequence[object], epoch: int, metrics: Mapping[str, float]) -> None:
        for callback in callbacks:
            if hasattr(callback, "on_epoch"):
                callback.on_epoch(epoch, metrics)  # type: ignore[attr-defined]
            elif callable(callback):
                callback(epoch, metrics)

    # ------------------------------------------------------------------
    # Parameter export

    def state_dict(self) -> Mapping[str, list]:
        state: dict = {}
        for idx, (W, B) in enumerate(zip(self.weights, self.biases)):
            state[f"W{idx}"] = W.to_list()
            state[f"B{idx}"] = B.to_list()
        return state

    def load_state_dict(self, state: Mapping[str, object]) -> None:
        weights: List[Matrix] = []
        biases: List[Vector] = []
        for idx, (W, B) in enumerate(zip(self.weights, self.biases)):
            for key in (f"W{idx}", f"B{idx}"):
                if key not in state:
                    raise KeyError(f"Missing parameter {key} in state dict")
            new_w = Matrix.from_list(np.asarray(state[f"W{idx}"], dtype=np.float64).tolist())
            new_b = Vector.from_list(np.asarray(state[f"B{idx}"], dtype=np.float64).reshape(-1).tolist())
            if new_w.shape != W.shape:
                raise ShapeMismatchError(f"W{idx} has shape {new_w.shape}, expected {W.shape}")
            if new_b.size != B.size:
                raise ShapeMismatchError(f"B{idx} has size {new_b.size}, expected {B.size}")
            weights.append(new_w)
            biases.append(new_b)
        self.weights = weights
        self.biases = biases


__all__ = ["NeuralNetwork"]
