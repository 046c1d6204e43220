"""
conftest.py
~~~~~~~~~~~

Shared fixtures for the xornet test suite.
"""

import matplotlib
matplotlib.use("Agg")

import pytest

from xornet import NeuralNetwork, XORDataset


@pytest.fixture
def xor_data():
    """The four exclusive-or samples."""
    return XORDataset(n_bits=2)


@pytest.fixture
def xor_network():
    """The [2, 1, 1] network used by the XOR script."""
    return NeuralNetwork([2, 1, 1], learning_rate=0.001)


@pytest.fixture
def deep_network():
    """A deeper, wider network for shape and propagation checks."""
    return NeuralNetwork([3, 4, 5, 2], learning_rate=0.1)
