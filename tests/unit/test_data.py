import numpy as np
import pytest

from sgdnet.core.errors import ShapeMismatchError
from sgdnet.data import (
    available_datasets,
    gaussian_blobs,
    get_dataset,
    load_npz,
    make_examples,
    one_hot,
    xor,
)
from sgdnet.data.registry import DatasetSpec, register_dataset
from sgdnet.data.utils import deterministic_split


def _write_npz(path, n_train=6, n_test=3):
    rng = np.random.default_rng(0)
    np.savez(
        path,
        train_images=rng.integers(0, 2, size=(n_train, 2, 2)).astype(np.float64),
        train_labels=np.arange(n_train) % 3,
        test_images=rng.integers(0, 2, size=(n_test, 2, 2)).astype(np.float64),
        test_labels=np.arange(n_test) % 3,
    )
    return path


def test_one_hot():
    assert one_hot(2, 4).to_list() == [0.0, 0.0, 1.0, 0.0]
    with pytest.raises(ValueError):
        one_hot(4, 4)


def test_make_examples_pairs_rows():
    examples = make_examples([[1, 2], [3, 4]], np.eye(2))
    assert [e.input.to_list() for e in examples] == [[1.0, 2.0], [3.0, 4.0]]
    assert examples[1].target.to_list() == [0.0, 1.0]
    with pytest.raises(ShapeMismatchError):
        make_examples([[1, 2]], np.eye(2))


def test_xor_targets():
    examples = xor()
    assert [e.input.to_list() for e in examples] == [[0, 0], [0, 1], [1, 0], [1, 1]]
    assert [e.target.to_list() for e in examples] == [[1, 0], [0, 1], [0, 1], [1, 0]]
    assert [e.target.to_list() for e in xor(one_hot=False)] == [[0], [1], [1], [0]]


def test_gaussian_blobs_is_seeded():
    inputs, targets = gaussian_blobs(n=30, seed=3)
    assert inputs.shape == (30, 2)
    assert targets.shape == (30, 3)
    assert np.all(targets.sum(axis=1) == 1)
    again, _ = gaussian_blobs(n=30, seed=3)
    assert np.array_equal(inputs, again)


def test_deterministic_split():
    split = deterministic_split(10, eval_split=0.3, seed=1)
    assert split.sizes == {"train": 7, "eval": 3}
    assert sorted(np.concatenate([split.train, split.eval]).tolist()) == list(range(10))
    with pytest.raises(ValueError):
        deterministic_split(10, eval_split=1.0)


def test_registry_builds_known_datasets():
    assert {"xor", "blobs", "npz"} <= set(available_datasets())
    spec = get_dataset("xor", repeat=3)
    assert spec.splits == {"train": 12, "eval": 4}
    assert (spec.d_in, spec.d_out) == (2, 2)
    blobs = get_dataset("blobs", n=50, eval_split=0.2)
    assert blobs.splits == {"train": 40, "eval": 10}
    assert blobs.provenance["type"] == "blobs"


def test_registry_rejects_unknown_names():
    with pytest.raises(KeyError, match="Available datasets"):
        get_dataset("missing")


def test_register_dataset_decorator():
    @register_dataset("tiny-constant")
    def _tiny(**_):
        examples = make_examples([[0.5]], [[1.0]])
        return DatasetSpec(name="tiny-constant", train=examples, eval=[], d_in=1, d_out=1)

    assert get_dataset("tiny-constant").splits == {"train": 1, "eval": 0}


def test_load_npz_flattens_and_encodes(tmp_path):
    path = _write_npz(tmp_path / "digits.npz")
    train = load_npz(path, limit=4, num_classes=3)
    assert len(train) == 4
    assert train[0].input.size == 4
    assert [e.target.to_list() for e in train[:3]] == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    with pytest.raises(KeyError):
        load_npz(path, split="validation")


def test_load_npz_zero_limit_yields_no_examples(tmp_path):
    path = _write_npz(tmp_path / "digits.npz")
    assert load_npz(path, limit=0, num_classes=3) == []
    assert load_npz(path, split="test", limit=0, num_classes=3) == []


def test_npz_dataset_through_registry(tmp_path):
    path = _write_npz(tmp_path / "digits.npz")
    spec = get_dataset("npz", path=str(path), eval_limit=2, num_classes=3)
    assert spec.splits == {"train": 6, "eval": 2}
    assert (spec.d_in, spec.d_out) == (4, 3)
