"""Puzzle Adventure: an accessible two-level mini-game."""

__version__ = "0.1.0"
