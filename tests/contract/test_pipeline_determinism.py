import json
from pathlib import Path

import pytest

from sgdnet.training import pipelines


def _xor_config(run_dir, epochs=25):
    config = dict(pipelines.load_preset("xor"))
    config["train"] = {**config["train"], "epochs": epochs, "run_dir": str(run_dir)}
    return config


def test_same_config_produces_identical_artifacts(tmp_path):
    first = pipelines.run_pipeline(_xor_config(tmp_path / "a"))
    second = pipelines.run_pipeline(_xor_config(tmp_path / "b"))

    assert first.epochs == second.epochs == 25
    for attr in ("metrics_path", "weights_path", "biases_path"):
        assert Path(getattr(first, attr)).read_bytes() == Path(getattr(second, attr)).read_bytes()


def test_run_writes_every_artifact(tmp_path):
    result = pipelines.run_pipeline(_xor_config(tmp_path / "run", epochs=3))
    run_dir = tmp_path / "run"
    for name in ("metrics.jsonl", "metrics.csv", "weights.json", "biases.json",
                 "params.npz", "config.json", "manifest.json"):
        assert (run_dir / name).exists(), name

    records = [json.loads(line) for line in Path(result.metrics_path).read_text().splitlines()]
    assert [r["epoch"] for r in records] == [1, 2, 3]
    assert {"loss", "eval_accuracy", "eval_correct", "eval_total"} <= set(records[0])
    saved = json.loads((run_dir / "config.json").read_text())
    assert saved["model"]["structure"] == [2, 8, 2]


def test_should_stop_cuts_the_run_short(tmp_path):
    result = pipelines.run_pipeline(_xor_config(tmp_path / "stop"), should_stop=lambda: True)
    assert result.epochs == 0
    assert Path(result.weights_path).exists()


def test_structure_must_match_dataset(tmp_path):
    config = _xor_config(tmp_path / "bad")
    config["model"] = {"structure": [3, 4, 2]}
    with pytest.raises(ValueError):
        pipelines.run_pipeline(config)


def test_config_sections_are_required():
    with pytest.raises(KeyError):
        pipelines.run_pipeline({"data": {"name": "xor"}})
    with pytest.raises(KeyError):
        pipelines.load_preset("nope")


def test_merge_config_is_recursive():
    merged = pipelines.merge_config(
        {"train": {"epochs": 1, "seed": 0}, "model": {"hidden": [4]}},
        {"train": {"epochs": 9}},
    )
    assert merged == {"train": {"epochs": 9, "seed": 0}, "model": {"hidden": [4]}}
