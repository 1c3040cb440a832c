"""Charades - a random card deck for the terminal."""

__version__ = "0.1.0"
