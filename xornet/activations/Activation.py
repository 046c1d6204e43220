from enum import Enum

import numpy as np

from ..errors import UnsupportedActivationError


class Activation(Enum):
    SIGMOID = "sigmoid"
    SIGMOID_DERIVATIVE = "sigmoid_derivative"
    RELU = "relu"


# Activations a layer may use for its outputs
LAYER_ACTIVATIONS = (Activation.SIGMOID, Activation.RELU)


def sigmoid(z):
    return 1 / (1 + np.exp(-z))


def sigmoid_derivative(z):
    sig = sigmoid(z)
    return sig * (1 - sig)


def relu(z):
    return np.maximum(0.0, z)


_FUNCTIONS = {
    Activation.SIGMOID: sigmoid,
    Activation.SIGMOID_DERIVATIVE: sigmoid_derivative,
    Activation.RELU: relu,
}


def _check(activation):
    if not isinstance(activation, Activation):
        raise UnsupportedActivationError(
            f"Unsupported activation function: {activation!r}"
        )


def activate(x, activation=Activation.SIGMOID):
    """
    Apply `activation` elementwise to a scalar or array.

    Raises UnsupportedActivationError for anything that is not an
    Activation member (plain strings included).
    """
    _check(activation)
    return _FUNCTIONS[activation](x)


def derivative(z, activation=Activation.SIGMOID):
    """Derivative of a layer activation at pre-activation `z`."""
    _check(activation)
    if activation is Activation.SIGMOID:
        return activate(z, Activation.SIGMOID_DERIVATIVE)
    if activation is Activation.RELU:
        return (np.asarray(z) > 0).astype(np.float64)
    raise UnsupportedActivationError(
        f"{activation.value} has no derivative defined as a layer activation"
    )
