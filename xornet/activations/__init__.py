from .Activation import Activation, activate, derivative, LAYER_ACTIVATIONS

__all__ = [
    "Activation",
    "activate",
    "derivative",
    "LAYER_ACTIVATIONS",
]
