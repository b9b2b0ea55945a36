"""Built-in dataset and default hyperparameters."""

from __future__ import annotations

from typing import List

import numpy as np

from .core.types import NetworkConfig, Sample
from .training.trainer import TrainerConfig

DEFAULT_CONFIG = NetworkConfig(input_size=3, hidden_size=4, output_size=2, learning_rate=0.1)
DEFAULT_TRAINER = TrainerConfig(epochs=1000, frame_delay=0.1)

# Three inputs (the last is a constant 1), two targets.
_INPUTS = (
    (0.0, 0.0, 1.0),
    (0.0, 1.0, 1.0),
    (1.0, 0.0, 1.0),
    (1.0, 1.0, 1.0),
)
_TARGETS = (
    (0.0, 1.0),
    (1.0, 1.0),
    (1.0, 0.0),
    (0.0, 0.0),
)


def default_samples() -> List[Sample]:
    samples: List[Sample] = []
    for x, y in zip(_INPUTS, _TARGETS):
        inputs = np.array(x, dtype=np.float64)
        targets = np.array(y, dtype=np.float64)
        inputs.setflags(write=False)
        targets.setflags(write=False)
        samples.append(Sample(inputs=inputs, targets=targets))
    return samples


__all__ = ["DEFAULT_CONFIG", "DEFAULT_TRAINER", "default_samples"]
