"""
test_datasets.py
~~~~~~~~~~~~~~~~

Unit tests for the parity / exclusive-or sample iterator.
"""

import numpy as np
import pytest

from xornet import XORDataset


@pytest.mark.unit
class TestXORDataset:
    def test_truth_table(self, xor_data):
        pairs = [(x.tolist(), y.tolist()) for x, y in xor_data]
        assert pairs == [
            ([0.0, 0.0], [0.0]),
            ([0.0, 1.0], [1.0]),
            ([1.0, 0.0], [1.0]),
            ([1.0, 1.0], [0.0]),
        ]
        assert len(xor_data) == 4

    def test_restartable(self, xor_data):
        first = [x.tolist() for x, _ in xor_data]
        second = [x.tolist() for x, _ in xor_data]
        assert first == second

    def test_yields_copies(self, xor_data):
        for x, y in xor_data:
            x[:] = 9
            y[:] = 9
        assert np.all(xor_data.X <= 1)
        assert np.all(xor_data.Y <= 1)

    def test_inputs(self, xor_data):
        assert [x.tolist() for x in xor_data.inputs()] == [
            [0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]
        ]

    def test_three_bit_parity(self):
        data = XORDataset(n_bits=3)
        assert len(data) == 8
        for x, y in data:
            assert x.shape == (3,)
            assert y[0] == sum(x) % 2

    def test_rejects_zero_bits(self):
        with pytest.raises(ValueError):
            XORDataset(n_bits=0)
