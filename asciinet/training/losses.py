"""Per-sample loss used by the training loop."""

from __future__ import annotations

import numpy as np

from ..core.types import Array


def mean_squared_error(output: Array, targets: Array) -> float:
    """Mean over output units of ``(target - output) ** 2``."""

    diff = np.asarray(targets, dtype=np.float64) - np.asarray(output, dtype=np.float64)
    return float(np.mean(np.square(diff)))


__all__ = ["mean_squared_error"]
