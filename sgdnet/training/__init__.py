"""Training engine for SGDNet."""

from .network import NeuralNetwork
from .shuffle import fisher_yates, partition

__all__ = ["NeuralNetwork", "fisher_yates", "partition"]
