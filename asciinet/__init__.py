"""asciinet public API."""

from .core import activations  # noqa: F401
from .core import types  # noqa: F401
from .core.entropy import EntropyUnavailableError
from .core.network import Network
from .core.types import Activations, NetworkConfig, NetworkParameters, Sample
from .data import DEFAULT_CONFIG, DEFAULT_TRAINER, default_samples
from .reporting import AsciiRenderer, CsvSink, JsonlSink
from .training import Trainer, TrainerConfig

__all__ = [
    "Activations",
    "AsciiRenderer",
    "CsvSink",
    "DEFAULT_CONFIG",
    "DEFAULT_TRAINER",
    "EntropyUnavailableError",
    "JsonlSink",
    "Network",
    "NetworkConfig",
    "NetworkParameters",
    "Sample",
    "Trainer",
    "TrainerConfig",
    "activations",
    "default_samples",
    "types",
]
