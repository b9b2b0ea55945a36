"""Activation utilities for asciinet."""

from __future__ import annotations

import numpy as np

from .types import Array


def sigmoid(x: Array) -> Array:
    """Return the logistic sigmoid ``1 / (1 + e^-x)``."""

    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=np.float64)))


def sigmoid_derivative(a: Array) -> Array:
    """Derivative of the sigmoid expressed through its output ``a``."""

    return a * (1.0 - a)
