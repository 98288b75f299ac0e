"""A falling-bricks puzzle game for the terminal, with an engine usable from code."""

__version__ = "0.1.0"