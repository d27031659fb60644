"""A two-player chess board with move validation, check detection and a pygame window."""

__version__ = "1.0.0"