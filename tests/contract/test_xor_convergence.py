from sgdnet.data import xor
from sgdnet.training.network import NeuralNetwork


def test_xor_is_learned_with_a_hidden_layer():
    examples = xor()
    net = NeuralNetwork([2, 8, 2], seed=0)
    result = net.train(examples, batch_size=1, epochs=3000, step_size=2.0, eval_set=examples)

    assert result.epochs == 3000
    assert result.history[-1]["loss"] < result.history[0]["loss"]
    evaluation = net.evaluate(examples)
    assert evaluation.correct == 4
    assert [net.predict(e.input) for e in examples] == [0, 1, 1, 0]


def test_single_output_xor_reduces_cost():
    examples = xor(one_hot=False)
    net = NeuralNetwork([2, 6, 1], seed=1)
    result = net.train(examples, batch_size=1, epochs=500, step_size=2.0)
    assert result.history[-1]["loss"] < result.history[0]["loss"]


def test_single_output_xor_is_learned_from_a_weak_start():
    # Hidden units start as soft OR / NAND gates, the output as a soft AND
    # that still misclassifies (0, 1) and (1, 0).
    net = NeuralNetwork.from_parameters(
        [[[2.0, 2.0], [-2.0, -2.0]], [[2.0, 2.0]]],
        [[-1.0, 3.0], [-3.0]],
        seed=0,
    )
    examples = xor(one_hot=False)
    targets = [0, 1, 1, 0]
    before = [net.forward_pass(e.input)[0] for e in examples]
    assert [int(value > 0.5) for value in before] == [0, 0, 0, 0]

    net.train(examples, batch_size=1, epochs=2000, step_size=2.0)

    after = [net.forward_pass(e.input)[0] for e in examples]
    assert [int(value > 0.5) for value in after] == targets
    for target, old, new in zip(targets, before, after):
        assert (new > old) if target else (new < old)
