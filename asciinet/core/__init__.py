"""Core numerical primitives for asciinet."""

from . import activations, entropy, network, types

__all__ = ["activations", "entropy", "network", "types"]
