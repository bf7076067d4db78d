"""A raycasting first-person game with levels read from a text file."""

__version__ = "0.1.0"