"""Terminal renderer that draws each training step as ASCII art."""

from __future__ import annotations

import sys
from typing import Mapping, TextIO

from ..core.types import Array, StepSnapshot

CLEAR_SCREEN = "\033[2J\033[H"
DIVIDER = "-" * 40

_INPUT_INDENT = 8
_HIDDEN_INDENT = 9
_OUTPUT_INDENT = 9


def _neuron(value: float, label: str) -> str:
    return f"({label}{value:.2f})"


def _glyph(weight: float) -> str:
    return "/" if weight >= 0 else "\\"


class AsciiRenderer:
    """Read-only visualiser; implements ``on_step`` and ``on_epoch``."""

    def __init__(self, stream: TextIO | None = None, *, clear: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.clear = clear

    def render(self, snapshot: StepSnapshot) -> str:
        params = snapshot.parameters
        hidden = snapshot.activations.hidden
        output = snapshot.activations.output
        lines: list[str] = [
            f"Epoch: {snapshot.epoch} | Loss: {snapshot.loss:.4f}",
            "",
            "Input Layer:",
        ]
        lines.extend(self._layer(snapshot.inputs, "x", _INPUT_INDENT))
        lines.append(DIVIDER)
        lines.extend(self._connections(params.weights1))
        lines.append("")
        lines.append("Hidden Layer:")
        lines.extend(self._layer(hidden, "h", _HIDDEN_INDENT))
        lines.append(DIVIDER)
        lines.extend(self._connections(params.weights2))
        lines.append("")
        lines.append("Output Layer:")
        suffixes = [f" -> Target: {t:.2f}" for t in snapshot.targets]
        lines.extend(self._layer(output, "y", _OUTPUT_INDENT, suffixes))
        lines.append("")
        lines.append("Backpropagation:")
        errors = [f"Error: {t - o:.4f}" for t, o in zip(snapshot.targets, output)]
        pad = " " * _OUTPUT_INDENT
        for idx, text in enumerate(errors):
            lines.append(pad + text)
            if idx < len(errors) - 1:
                lines.append(" " * (_OUTPUT_INDENT + 1) + "|")
        body = "\n".join(lines) + "\n"
        return (CLEAR_SCREEN if self.clear else "") + body

    def on_step(self, snapshot: StepSnapshot) -> None:
        self.stream.write(self.render(snapshot))
        self.stream.flush()

    def on_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        self.stream.write(f"\nAverage Loss: {float(metrics['loss']):.4f}\n")
        self.stream.flush()

    @staticmethod
    def _layer(
        values: Array, label: str, indent: int, suffixes: list[str] | None = None
    ) -> list[str]:
        out: list[str] = []
        count = len(values)
        for idx, value in enumerate(values):
            suffix = suffixes[idx] if suffixes else ""
            out.append(" " * indent + _neuron(float(value), label) + suffix)
            if idx < count - 1:
                out.append(" " * (indent + 1) + "|")
        return out

    @staticmethod
    def _connections(weights: Array) -> list[str]:
        return ["".join(_glyph(float(w)) for w in row) for row in weights]


__all__ = ["AsciiRenderer", "CLEAR_SCREEN"]
