from .logger import RunLogger

__all__ = ["RunLogger"]
