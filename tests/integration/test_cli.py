import json
from pathlib import Path

import pytest

from cli.main import main


def _last_payload(capsys):
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines, "CLI should emit at least one line"
    return json.loads(lines[-1])


def test_cli_xor_preset(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["--preset", "xor", "--epochs", "5", "--run-dir", "out", "--quiet"])
    payload = _last_payload(capsys)
    assert payload["epochs"] == 5
    run_dir = Path("out")
    assert (run_dir / "metrics.jsonl").exists()
    assert (run_dir / "manifest.json").exists()
    assert Path(payload["weights"]) == run_dir / "weights.json"


def test_cli_lists_presets(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--list-presets"])
    assert excinfo.value.code == 0
    names = capsys.readouterr().out.split()
    assert {"xor", "blobs", "mnist-npz"} <= set(names)


def test_cli_config_override_and_dump(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    Path("override.yaml").write_text(
        "model:\n  hidden: [4]\ntrain:\n  epochs: 2\n  batch_size: 2\n"
    )
    main(["--config", "override.yaml", "--run-dir", "yaml-run", "--dump-config", "resolved.json"])
    payload = _last_payload(capsys)
    assert payload["epochs"] == 2
    resolved = json.loads(Path("resolved.json").read_text())
    assert resolved["train"]["batch_size"] == 2
    assert resolved["data"]["name"] == "xor"
    saved = json.loads(Path("yaml-run/config.json").read_text())
    assert saved["model"]["structure"] == [2, 4, 2]


def test_cli_full_json_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    config = {
        "data": {"name": "blobs", "options": {"n": 30}},
        "model": {"hidden": [3]},
        "train": {"epochs": 2, "batch_size": 5, "step_size": 0.5, "run_dir": "blobs-run"},
    }
    Path("run.json").write_text(json.dumps(config))
    main(["--config", "run.json"])
    out = capsys.readouterr().out
    assert "=== SGDNet run ===" in out
    assert "Epoch 2 finished" in out
    assert "Successfully classified" in out
    assert Path("blobs-run/params.npz").exists()
