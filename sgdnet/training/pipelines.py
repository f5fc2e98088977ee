"""Pipeline assembly: presets, config files and single training runs."""

from __future__ import annotations

import json
import time
from copy import deepcopy
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Sequence

from ..core.types import RunResult
from ..data import get_dataset
from ..persistence import save_checkpoint, save_json
from ..reporting.artifacts import write_manifest
from ..reporting.metrics import ConsoleSink, CsvSink, JsonlSink
from ..reporting.plots import PlotAdapter
from .network import NeuralNetwork

_PRESETS: Dict[str, Mapping[str, object]] = {
    "xor": {
        "data": {"name": "xor", "options": {"one_hot": True}},
        "model": {"hidden": [8], "init_range": [-1.0, 1.0]},
        "train": {
            "epochs": 3000,
            "batch_size": 1,
            "step_size": 2.0,
            "seed": 0,
            "run_dir": "runs/xor",
            "enable_plots": False,
            "verbose": False,
        },
    },
    "blobs": {
        "data": {"name": "blobs", "options": {"n": 150, "spread": 0.5, "seed": 0}},
        "model": {"hidden": [8], "init_range": [-1.0, 1.0]},
        "train": {
            "epochs": 30,
            "batch_size": 10,
            "step_size": 1.0,
            "seed": 0,
            "run_dir": "runs/blobs",
            "enable_plots": False,
            "verbose": True,
        },
    },
    "mnist-npz": {
        "data": {
            "name": "npz",
            "options": {"path": "data/mnist.npz", "train_limit": 7500, "eval_limit": 1000},
        },
        "model": {"hidden": [20], "init_range": [-1.0, 1.0]},
        "train": {
            "epochs": 30,
            "batch_size": 10,
            "step_size": 0.6,
            "seed": 0,
            "run_dir": "runs/mnist",
            "enable_plots": False,
            "verbose": True,
        },
    },
}


def presets() -> Mapping[str, Mapping[str, object]]:
    return {name: deepcopy(cfg) for name, cfg in _PRESETS.items()}


def load_preset(name: str) -> Mapping[str, object]:
    try:
        return deepcopy(_PRESETS[name])
    except KeyError as exc:
        available = ", ".join(sorted(_PRESETS))
        raise KeyError(f"Unknown preset {name!r}. Available presets: {available}") from exc


def load_config(path: str | Path) -> Mapping[str, object]:
    """Read a JSON or YAML config file into a mapping."""

    path = Path(path)
    text = path.read_text()
    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to load YAML configs") from exc
        data = yaml.safe_load(text) or {}
    elif suffix == ".json":
        data = json.loads(text or "{}")
    else:
        raise ValueError(f"Unsupported config file type: {path.suffix}")

    if not isinstance(data, Mapping):
        raise TypeError(f"Config {path.name} must decode to a mapping")
    return data


def merge_config(base: dict, override: Mapping[str, object]) -> dict:
    """Recursively merge ``override`` into ``base`` and return ``base``."""

    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            base[key] = merge_config(dict(base[key]), value)
        else:
            base[key] = value
    return base


def build_structure(d_in: int, d_out: int, model_cfg: Mapping[str, object]) -> List[int]:
    if "structure" in model_cfg:
        structure = [int(width) for width in model_cfg["structure"]]  # type: ignore[union-attr]
        if structure[0] != d_in or structure[-1] != d_out:
            raise ValueError(
                f"Configured structure {structure} does not match dataset widths ({d_in}, {d_out})"
            )
        return structure
    hidden = [int(width) for width in model_cfg.get("hidden", [])]  # type: ignore[union-attr]
    return [d_in, *hidden, d_out]


def run_pipeline(
    config: Mapping[str, object],
    *,
    should_stop: Callable[[], bool] | None = None,
) -> RunResult:
    """Train one network as described by ``config`` and write its artifacts."""

    missing = {"data", "model", "train"} - set(config)
    if missing:
        raise KeyError(f"Config is missing required sections: {', '.join(sorted(missing))}")
    data_cfg = dict(config["data"])  # type: ignore[arg-type]
    model_cfg = dict(config["model"])  # type: ignore[arg-type]
    train_cfg = dict(config["train"])  # type: ignore[arg-type]

    dataset = get_dataset(str(data_cfg["name"]), **dict(data_cfg.get("options", {})))
    structure = build_structure(dataset.d_in, dataset.d_out, model_cfg)

    seed = int(train_cfg.get("seed", 0))
    batch_size = int(train_cfg.get("batch_size", 1))
    epochs = int(train_cfg.get("epochs", 1))
    step_size = float(train_cfg.get("step_size", train_cfg.get("lr", 0.1)))
    low, high = (float(v) for v in model_cfg.get("init_range", (-1.0, 1.0)))  # type: ignore[union-attr]

    network = NeuralNetwork(structure, seed=seed, init_range=(low, high))

    run_dir = _resolve_run_dir(train_cfg, dataset.name)
    run_dir.mkdir(parents=True, exist_ok=True)

    _print_startup_summary(
        dataset_name=dataset.name,
        structure=structure,
        splits=dataset.splits,
        epochs=epochs,
        batch_size=batch_size,
        step_size=step_size,
        param_count=network.parameter_count(),
    )

    jsonl = JsonlSink(run_dir / "metrics.jsonl", seed=seed)
    csv_sink = CsvSink(run_dir / "metrics.csv")
    plots = PlotAdapter(run_dir, enable_plots=bool(train_cfg.get("enable_plots", False)))
    callbacks: List[object] = [jsonl, csv_sink, plots]
    if bool(train_cfg.get("verbose", True)):
        callbacks.append(ConsoleSink())

    result = network.train(
        dataset.train,
        batch_size,
        epochs,
        step_size,
        dataset.eval or None,
        callbacks=callbacks,
        should_stop=should_stop,
    )
    plots.close()

    weights_path, biases_path = save_json(network, run_dir)
    checkpoint_path = save_checkpoint(network, run_dir / "params.npz")
    resolved = _safe_config(config, structure)
    (run_dir / "config.json").write_text(json.dumps(resolved, indent=2))
    manifest = write_manifest(
        run_dir / "manifest.json",
        config=resolved,
        dataset_provenance=dataset.provenance,
        structure=structure,
    )

    return RunResult(
        epochs=result.epochs,
        metrics_path=str(jsonl.path),
        manifest_path=manifest,
        weights_path=weights_path,
        biases_path=biases_path,
        checkpoint_path=checkpoint_path,
    )


def _resolve_run_dir(train_cfg: Mapping[str, object], dataset: str) -> Path:
    if "run_dir" in train_cfg:
        return Path(str(train_cfg["run_dir"]))
    timestamp = time.strftime("%Y%m%d-%H%M%S")
    return Path("runs") / timestamp / dataset


def _safe_config(config: Mapping[str, object], structure: Sequence[int]) -> Mapping[str, object]:
    copied = json.loads(json.dumps(config))
    copied.setdefault("model", {})["structure"] = list(structure)
    return copied


def _print_startup_summary(
    *,
    dataset_name: str,
    structure: Sequence[int],
    splits: Mapping[str, int],
    epochs: int,
    batch_size: int,
    step_size: float,
    param_count: int,
) -> None:
    print("=== SGDNet run ===")
    print(f"Dataset       : {dataset_name}")
    print(f"Structure     : {list(structure)}")
    print(f"Examples      : train={splits['train']} eval={splits['eval']}")
    print(f"Epochs        : {epochs}")
    print(f"Batch size    : {batch_size}")
    print(f"Step size     : {step_size}")
    print(f"Parameters    : {param_count}")
    print("==================")


__all__ = [
    "build_structure",
    "load_config",
    "load_preset",
    "merge_config",
    "presets",
    "run_pipeline",
]
