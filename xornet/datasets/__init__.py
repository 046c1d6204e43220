from .XORDataset import XORDataset

__all__ = ["XORDataset"]
