"""
test_activations.py
~~~~~~~~~~~~~~~~~~~

Unit tests for the closed set of activation functions.
"""

import numpy as np
import pytest

from xornet.activations import Activation, activate, derivative
from xornet.errors import UnsupportedActivationError


@pytest.mark.unit
class TestActivate:
    def test_sigmoid_is_default(self):
        assert activate(0.0) == pytest.approx(0.5)
        assert activate(2.0) == pytest.approx(1 / (1 + np.exp(-2.0)))

    def test_sigmoid_derivative(self):
        assert activate(0.0, Activation.SIGMOID_DERIVATIVE) == pytest.approx(0.25)

    def test_relu(self):
        np.testing.assert_array_equal(
            activate(np.array([-2.0, 0.0, 3.0]), Activation.RELU), [0.0, 0.0, 3.0]
        )

    def test_elementwise_on_arrays(self):
        out = activate(np.array([-1.0, 0.0, 1.0]))
        assert out.shape == (3,)
        assert out[0] + out[2] == pytest.approx(1.0)

    @pytest.mark.parametrize("tag", ["sigmoid", "tanh", None, 0])
    def test_unsupported(self, tag):
        with pytest.raises(UnsupportedActivationError):
            activate(1.0, tag)


@pytest.mark.unit
class TestDerivative:
    def test_sigmoid(self):
        z = np.array([-1.0, 0.0, 2.0])
        s = 1 / (1 + np.exp(-z))
        np.testing.assert_allclose(derivative(z, Activation.SIGMOID), s * (1 - s))

    def test_relu_step(self):
        np.testing.assert_array_equal(
            derivative(np.array([-1.0, 0.0, 0.5]), Activation.RELU), [0.0, 0.0, 1.0]
        )

    def test_not_a_layer_activation(self):
        with pytest.raises(UnsupportedActivationError):
            derivative(0.0, Activation.SIGMOID_DERIVATIVE)
