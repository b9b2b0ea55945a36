"""Training loop and loss for asciinet."""

from .losses import mean_squared_error
from .trainer import Trainer, TrainerConfig

__all__ = ["Trainer", "TrainerConfig", "mean_squared_error"]
