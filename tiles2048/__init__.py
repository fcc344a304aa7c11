"""The 2048 sliding-tile puzzle: board rules, scores, colours and a terminal interface."""

__version__ = "1.0.0"
__all__ = ["__version__"]