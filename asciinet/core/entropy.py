"""Cryptographically strong random numbers for parameter initialisation."""

from __future__ import annotations

import os
from typing import Callable, Sequence

import numpy as np

from .types import Array

_SIGN_MASK = (1 << 63) - 1
# 63 usable bits shifted down to the 53 a double can hold exactly.
_MANTISSA_SHIFT = 10
_SCALE = 1.0 / (1 << 53)

RandomSource = Callable[[], float]


class EntropyUnavailableError(RuntimeError):
    """Raised when the operating system cannot supply random bytes."""


def secure_random() -> float:
    """Return a uniform float in ``[0, 1)`` drawn from the OS CSPRNG.

    Eight bytes are read as a little-endian unsigned integer, the sign bit is
    dropped and the remaining 63 bits are scaled by ``2**-63``.
    """

    try:
        raw = os.urandom(8)
    except (NotImplementedError, OSError) as exc:
        raise EntropyUnavailableError(
            f"cannot generate random number: {exc}"
        ) from exc
    value = int.from_bytes(raw, "little") & _SIGN_MASK
    return (value >> _MANTISSA_SHIFT) * _SCALE


def uniform_centered(
    shape: Sequence[int], random: RandomSource = secure_random
) -> Array:
    """Fill an array of ``shape`` with ``random() - 0.5``."""

    size = int(np.prod(shape, dtype=np.int64))
    values = np.fromiter((random() - 0.5 for _ in range(size)), dtype=np.float64, count=size)
    return values.reshape(tuple(shape))


__all__ = ["EntropyUnavailableError", "RandomSource", "secure_random", "uniform_centered"]
