"""Core typing contracts for asciinet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class NetworkConfig:
    """Topology and learning rate of a single-hidden-layer network."""

    input_size: int
    hidden_size: int
    output_size: int
    learning_rate: float = 0.1

    def __post_init__(self) -> None:
        for name in ("input_size", "hidden_size", "output_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @property
    def shapes(self) -> dict[str, tuple[int, ...]]:
        return {
            "weights1": (self.input_size, self.hidden_size),
            "weights2": (self.hidden_size, self.output_size),
            "bias1": (self.hidden_size,),
            "bias2": (self.output_size,),
        }


@dataclass(frozen=True)
class NetworkParameters:
    """Weight matrices and bias vectors.

    ``weights1[i, j]`` is the weight from input unit ``i`` to hidden unit ``j``;
    ``weights2`` follows the same convention from hidden to output units.
    """

    weights1: Array
    weights2: Array
    bias1: Array
    bias2: Array

    def copy(self, *, writeable: bool = True) -> "NetworkParameters":
        arrays = []
        for value in (self.weights1, self.weights2, self.bias1, self.bias2):
            out = np.array(value, dtype=np.float64, copy=True)
            out.setflags(write=writeable)
            arrays.append(out)
        return NetworkParameters(*arrays)

    def shapes(self) -> dict[str, tuple[int, ...]]:
        return {
            "weights1": self.weights1.shape,
            "weights2": self.weights2.shape,
            "bias1": self.bias1.shape,
            "bias2": self.bias2.shape,
        }


@dataclass(frozen=True)
class Sample:
    """A single training pair."""

    inputs: Array
    targets: Array


@dataclass(frozen=True)
class Activations:
    """Hidden and output activations captured during the forward pass."""

    hidden: Array
    output: Array


@dataclass(frozen=True)
class StepSnapshot:
    """Everything an observer needs to draw one training step."""

    epoch: int
    index: int
    parameters: NetworkParameters
    inputs: Array
    activations: Activations
    targets: Array
    loss: float


@dataclass(frozen=True)
class EpochSummary:
    epoch: int
    loss: float
    samples: int


@dataclass(frozen=True)
class RunResult:
    """Summary returned by :meth:`asciinet.training.trainer.Trainer.run`."""

    steps: int
    epochs: List[EpochSummary] = field(default_factory=list)

    @property
    def epoch_losses(self) -> List[float]:
        return [summary.loss for summary in self.epochs]

    @property
    def final_loss(self) -> float:
        return self.epoch_losses[-1] if self.epoch_losses else float("nan")
