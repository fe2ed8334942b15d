"""A turn-based terminal combat game against a randomly chosen demon."""

__version__ = "0.1.0"