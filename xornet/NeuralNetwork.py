from enum import Enum
from numbers import Integral

import numpy as np

from .activations import Activation, activate, derivative, LAYER_ACTIVATIONS
from .errors import (
    InvalidTopologyError,
    DimensionMismatchError,
    UnsupportedActivationError,
)

INITIAL_WEIGHT = 0.01
INITIAL_BIAS = 0.0


class UpdateRule(Enum):
    # error projected through raw weights, each weight gated on its own sign
    WEIGHT_GATE = "weight_gate"
    # textbook backprop: delta scaled by f'(pre), weights step by delta * a_prev
    SIGMOID_GRADIENT = "sigmoid_gradient"


def _as_vector(values, expected, what):
    vec = np.asarray(values, dtype=np.float64)
    if vec.ndim != 1 or vec.shape[0] != expected:
        raise DimensionMismatchError(
            f"{what} must be a vector of length {expected}, got shape {vec.shape}"
        )
    return vec


def compute_error(output, target):
    """Raw residual output - target (not squared, not scaled)."""
    output = np.asarray(output, dtype=np.float64)
    target = np.asarray(target, dtype=np.float64)
    if output.ndim != 1 or target.ndim != 1 or output.shape != target.shape:
        raise DimensionMismatchError(
            f"output {output.shape} and target {target.shape} must be vectors of equal length"
        )
    return output - target


class NeuralNetwork:
    def __init__(
        self,
        topology,
        learning_rate=0.1,
        update_rule=UpdateRule.WEIGHT_GATE,
        activation=Activation.SIGMOID,
    ):
        self.topology = self._check_topology(topology)
        if not (np.isfinite(learning_rate) and learning_rate >= 0):
            raise ValueError(f"learning_rate must be a finite number >= 0, got {learning_rate}")
        if activation not in LAYER_ACTIVATIONS:
            raise UnsupportedActivationError(
                f"Unsupported layer activation: {activation!r}"
            )

        self.learning_rate = float(learning_rate)
        self.update_rule = UpdateRule(update_rule)
        self.activation = activation

        # weights[i - 1]: (n_i, n_{i-1}), biases[i - 1]: (n_i,)
        self.weights = []
        self.biases = []
        for n_in, n_out in zip(self.topology[:-1], self.topology[1:]):
            self.weights.append(np.full((n_out, n_in), INITIAL_WEIGHT, dtype=np.float64))
            self.biases.append(np.full(n_out, INITIAL_BIAS, dtype=np.float64))

        # cache from the last forward pass
        self._pre_activations = None
        self._activations = None

    @staticmethod
    def _check_topology(topology):
        try:
            sizes = tuple(topology)
        except TypeError:
            raise InvalidTopologyError(f"topology must be a sequence, got {topology!r}")
        if len(sizes) < 2:
            raise InvalidTopologyError(
                f"topology needs an input and an output layer, got {list(sizes)}"
            )
        for size in sizes:
            if isinstance(size, bool) or not isinstance(size, Integral) or size <= 0:
                raise InvalidTopologyError(
                    f"layer sizes must be positive integers, got {list(sizes)}"
                )
        return tuple(int(size) for size in sizes)

    @property
    def n_input(self):
        return self.topology[0]

    @property
    def n_output(self):
        return self.topology[-1]

    def forward(self, x):
        a = _as_vector(x, self.n_input, "input")
        pre_activations = []
        activations = [a]
        for W, b in zip(self.weights, self.biases):
            z = W @ a + b
            a = activate(z, self.activation)
            pre_activations.append(z)
            activations.append(a)

        self._pre_activations = pre_activations
        self._activations = activations
        return a

    def compute_error(self, output, target):
        output = _as_vector(output, self.n_output, "output")
        target = _as_vector(target, self.n_output, "target")
        return compute_error(output, target)

    def backward(self, error):
        """
        Update every weight and bias in place, output layer first.

        Returns the error propagated down to the input layer.
        """
        error = _as_vector(error, self.n_output, "error")
        if self.update_rule is UpdateRule.SIGMOID_GRADIENT:
            return self._backward_gradient(error)
        return self._backward_gated(error)

    def _backward_gated(self, error):
        lr = self.learning_rate
        for i in reversed(range(len(self.weights))):
            W, b = self.weights[i], self.biases[i]
            # read before the update below mutates W
            propagated = W.T @ error
            gate = (W > 0).astype(np.float64)

            b -= lr * error
            W -= lr * error[:, None] * gate

            error = propagated
        return error

    def _backward_gradient(self, error):
        if self._activations is None:
            raise ValueError("Must call forward() before backward()")
        lr = self.learning_rate
        for i in reversed(range(len(self.weights))):
            W, b = self.weights[i], self.biases[i]
            delta = error * derivative(self._pre_activations[i], self.activation)
            propagated = W.T @ delta

            b -= lr * delta
            W -= lr * np.outer(delta, self._activations[i])

            error = propagated
        return error

    def train(self, x, target):
        output = self.forward(x)
        error = self.compute_error(output, target)
        self.backward(error)

    def parameters(self):
        return list(zip(self.weights, self.biases))

    def __repr__(self):
        return (
            f"NeuralNetwork(topology={list(self.topology)}, "
            f"learning_rate={self.learning_rate}, update_rule={self.update_rule.name})"
        )
