"""Headless-safe plotting adapters."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple


class PlotAdapter:
    """Collect epoch metrics and optionally emit a matplotlib figure."""

    def __init__(self, run_dir: str | Path, enable_plots: bool = False, metric: str = "eval_accuracy"):
        self.enable_plots = enable_plots
        self.run_dir = Path(run_dir)
        self.metric = metric
        self._history: List[Tuple[int, float]] = []
        if self.enable_plots:
            self.run_dir.mkdir(parents=True, exist_ok=True)

    def on_epoch(self, epoch: int, metrics):
        if not self.enable_plots:
            return
        key = self.metric if self.metric in metrics else "loss"
        self._history.append((epoch, float(metrics.get(key, 0.0))))

    @property
    def path(self) -> Path:
        return self.run_dir / f"{self.metric}.png"

    def close(self) -> None:
        if not self.enable_plots or not self._history:
            return
        import matplotlib

        matplotlib.use("Agg", force=True)
        import matplotlib.pyplot as plt  # imported lazily for headless safety

        epochs, values = zip(*self._history)
        fig, ax = plt.subplots()
        ax.plot(epochs, values)
        ax.set_xlabel("Epoch")
        ax.set_ylabel(self.metric)
        ax.set_title("Training Curve")
        fig.savefig(self.path)
        plt.close(fig)

    __call__ = on_epoch
