"""Sliding 15-puzzle on a two-layer tile display."""

__version__ = "1.0.0"
