import math

import pytest

from sgdnet.core.activations import cost, cost_derivative, index_of_max, sigmoid, sigmoid_prime
from sgdnet.core.vector import Vector


def test_sigmoid_values_and_symmetry():
    assert sigmoid(0.0) == 0.5
    assert sigmoid(1.0) == pytest.approx(1 / (1 + math.e ** -1))
    assert sigmoid(2.0) + sigmoid(-2.0) == pytest.approx(1.0)


def test_sigmoid_saturates_without_overflow():
    assert sigmoid(1000.0) == 1.0
    assert sigmoid(-1000.0) == 0.0


def test_sigmoid_prime():
    assert sigmoid_prime(0.0) == 0.25
    h = 1e-6
    numeric = (sigmoid(0.3 + h) - sigmoid(0.3 - h)) / (2 * h)
    assert sigmoid_prime(0.3) == pytest.approx(numeric, rel=1e-6)


def test_quadratic_cost_and_derivative():
    output = Vector.from_list([0.5, 1.0])
    target = Vector.from_list([0.0, 1.0])
    assert cost(output, target) == pytest.approx(0.125)
    assert cost_derivative(output, target).to_list() == [0.5, 0.0]


def test_index_of_max():
    assert index_of_max([0.1, 0.7, 0.2]) == 1
    assert index_of_max([0.5, 0.5]) == 0
    assert index_of_max([]) == -1
