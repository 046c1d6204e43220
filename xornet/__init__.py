from .NeuralNetwork import NeuralNetwork, UpdateRule, compute_error
from .Trainer import Trainer
from .activations import Activation, activate
from .datasets import XORDataset
from .errors import (
    NetworkError,
    InvalidTopologyError,
    DimensionMismatchError,
    UnsupportedActivationError,
)

__version__ = "1.0.0"

__all__ = [
    "NeuralNetwork",
    "UpdateRule",
    "compute_error",
    "Trainer",
    "Activation",
    "activate",
    "XORDataset",
    "NetworkError",
    "InvalidTopologyError",
    "DimensionMismatchError",
    "UnsupportedActivationError",
]
