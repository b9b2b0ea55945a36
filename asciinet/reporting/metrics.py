"""Per-epoch loss sinks."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Mapping

FIELDS = ("epoch", "loss", "samples")


def _record(epoch: int, metrics: Mapping[str, float]) -> dict[str, float | int]:
    return {
        "epoch": int(epoch),
        "loss": float(metrics["loss"]),
        "samples": int(metrics["samples"]),
    }


class JsonlSink:
    """One JSON object per epoch; the file is truncated when the sink opens."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("")

    def on_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(_record(epoch, metrics)) + "\n")


class CsvSink:
    """Epoch rows under an ``epoch,loss,samples`` header."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8", newline="") as handle:
            csv.DictWriter(handle, fieldnames=FIELDS).writeheader()

    def on_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        with self.path.open("a", encoding="utf-8", newline="") as handle:
            csv.DictWriter(handle, fieldnames=FIELDS).writerow(_record(epoch, metrics))


__all__ = ["CsvSink", "JsonlSink"]
