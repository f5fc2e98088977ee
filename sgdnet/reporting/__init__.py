"""Reporting utilities for SGDNet."""

from .artifacts import write_manifest
from .metrics import ConsoleSink, CsvSink, JsonlSink
from .plots import PlotAdapter

__all__ = ["write_manifest", "JsonlSink", "CsvSink", "ConsoleSink", "PlotAdapter"]
