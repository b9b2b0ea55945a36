"""Online training loop with pluggable step/epoch observers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Mapping, Sequence

import numpy as np

from ..core.network import Network
from ..core.types import EpochSummary, RunResult, Sample, StepSnapshot
from .losses import mean_squared_error


@dataclass(frozen=True)
class TrainerConfig:
    """Epoch count and animation pacing."""

    epochs: int = 1000
    frame_delay: float = 0.1

    def __post_init__(self) -> None:
        if self.epochs < 0:
            raise ValueError(f"epochs must be non-negative, got {self.epochs}")
        if self.frame_delay < 0:
            raise ValueError(f"frame_delay must be non-negative, got {self.frame_delay}")

    @property
    def epoch_delay(self) -> float:
        return 2 * self.frame_delay


class Trainer:
    """Drive a :class:`Network` through a fixed dataset, one sample at a time.

    After every sample the trainer emits ``on_step(snapshot)`` and after every
    epoch ``on_epoch(epoch, metrics)`` to each callback that defines them.
    Samples are visited in the order given on every epoch.
    """

    def __init__(
        self,
        network: Network,
        samples: Sequence[Sample],
        config: TrainerConfig | None = None,
        callbacks: Sequence[object] | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not samples:
            raise ValueError("training requires at least one sample")
        net_cfg = network.config
        for idx, sample in enumerate(samples):
            if np.shape(sample.inputs) != (net_cfg.input_size,):
                raise ValueError(
                    f"sample {idx} inputs have shape {np.shape(sample.inputs)}, "
                    f"expected ({net_cfg.input_size},)"
                )
            if np.shape(sample.targets) != (net_cfg.output_size,):
                raise ValueError(
                    f"sample {idx} targets have shape {np.shape(sample.targets)}, "
                    f"expected ({net_cfg.output_size},)"
                )
        self.network = network
        self.samples = list(samples)
        self.config = config or TrainerConfig()
        self.callbacks = list(callbacks or [])
        self._sleep = sleep

    def run(self) -> RunResult:
        summaries: List[EpochSummary] = []
        steps = 0
        for epoch in range(self.config.epochs):
            total_loss = 0.0
            for index, sample in enumerate(self.samples):
                total_loss += self.step(epoch, index, sample)
                steps += 1
                self._pause(self.config.frame_delay)

            summary = EpochSummary(
                epoch=epoch, loss=total_loss / len(self.samples), samples=len(self.samples)
            )
            summaries.append(summary)
            self._emit_epoch(epoch, {"loss": summary.loss, "samples": summary.samples})
            self._pause(self.config.epoch_delay)
        return RunResult(steps=steps, epochs=summaries)

    def step(self, epoch: int, index: int, sample: Sample) -> float:
        """Train on one sample and notify observers; return its loss."""

        activations = self.network.forward(sample.inputs)
        loss = mean_squared_error(activations.output, sample.targets)
        self.network.backward(sample.inputs, activations, sample.targets)
        snapshot = StepSnapshot(
            epoch=epoch,
            index=index,
            parameters=self.network.parameters(),
            inputs=np.asarray(sample.inputs, dtype=np.float64),
            activations=activations,
            targets=np.asarray(sample.targets, dtype=np.float64),
            loss=loss,
        )
        self._emit_step(snapshot)
        return loss

    # ------------------------------------------------------------------
    # Internal helpers

    def _emit_step(self, snapshot: StepSnapshot) -> None:
        for callback in self.callbacks:
            if hasattr(callback, "on_step"):
                callback.on_step(snapshot)  # type: ignore[attr-defined]

    def _emit_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        for callback in self.callbacks:
            if hasattr(callback, "on_epoch"):
                callback.on_epoch(epoch, metrics)  # type: ignore[attr-defined]

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)


__all__ = ["Trainer", "TrainerConfig"]
