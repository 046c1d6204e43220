class NetworkError(ValueError):
    """Base class for faults raised by the network engine."""


class InvalidTopologyError(NetworkError):
    # layer sizes: at least two entries, every one a positive int
    pass


class DimensionMismatchError(NetworkError):
    # vector length disagrees with the width of the layer it feeds
    pass


class UnsupportedActivationError(NetworkError):
    pass
