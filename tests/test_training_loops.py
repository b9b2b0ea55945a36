from __future__ import annotations

from typing import List, Mapping

import numpy as np

from asciinet.core.network import Network
from asciinet.core.types import StepSnapshot
from asciinet.data import DEFAULT_CONFIG, default_samples
from asciinet.training.trainer import Trainer, TrainerConfig


class _Capture:
    """Record epoch losses and check the sigmoid range on every step."""

    def __init__(self) -> None:
        self.history: List[tuple[int, float]] = []
        self.out_of_range = 0

    def on_step(self, snapshot: StepSnapshot) -> None:
        output = snapshot.activations.output
        if np.any(output < 0.0) or np.any(output > 1.0):
            self.out_of_range += 1

    def on_epoch(self, epoch: int, metrics: Mapping[str, float]) -> None:
        self.history.append((epoch, float(metrics["loss"])))


def test_default_dataset_learns_over_thousand_epochs() -> None:
    network = Network(DEFAULT_CONFIG, random=np.random.default_rng(0).random)
    capture = _Capture()
    trainer = Trainer(
        network,
        default_samples(),
        TrainerConfig(epochs=1000, frame_delay=0.0),
        callbacks=[capture],
    )
    result = trainer.run()

    assert result.steps == 4000
    assert len(capture.history) == 1000
    assert capture.history[0][0] == 0
    assert capture.history[-1][0] == 999
    assert capture.history[-1][1] < capture.history[0][1]
    assert capture.out_of_range == 0


def test_secure_initialisation_also_learns() -> None:
    capture = _Capture()
    trainer = Trainer(
        Network(DEFAULT_CONFIG),
        default_samples(),
        TrainerConfig(epochs=1000, frame_delay=0.0),
        callbacks=[capture],
    )
    trainer.run()
    assert capture.history[-1][1] < capture.history[0][1]
    assert capture.out_of_range == 0
