"""Falling-block puzzle rules engine: board, pieces, scenes and agents."""

__version__ = "0.1.0"
