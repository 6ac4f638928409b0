"""Shuffled-roles chess: every piece type moves like a randomly dealt role."""

__version__ = "0.1.0"
