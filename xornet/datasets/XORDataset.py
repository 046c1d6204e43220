import numpy as np


class XORDataset:
    """
    All 2**n_bits binary inputs in counting order, each paired with its
    odd-parity target. n_bits=2 is the exclusive-or truth table:

        0 0 -> 0
        0 1 -> 1
        1 0 -> 1
        1 1 -> 0

    Iterating always restarts from the first sample, so one instance can
    drive any number of epochs.
    """

    def __init__(self, n_bits=2):
        if n_bits < 1:
            raise ValueError(f"n_bits must be >= 1, got {n_bits}")
        self.n_bits = n_bits

        combos = np.array(
            [list(map(int, format(i, f"0{n_bits}b"))) for i in range(2**n_bits)],
            dtype=np.float64,
        )
        self.X = combos                                    # (2^n, n)
        self.Y = (np.sum(combos, axis=1) % 2).reshape(-1, 1)  # odd parity = 1

    def __len__(self):
        return self.X.shape[0]

    def __iter__(self):
        for x, y in zip(self.X, self.Y):
            yield x.copy(), y.copy()

    def inputs(self):
        for x in self.X:
            yield x.copy()
