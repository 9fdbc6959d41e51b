"""Replay recorded chess games move by move onto a legal board state."""

__version__ = "0.1.0"
