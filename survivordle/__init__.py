"""Survivordle: a daily guess-the-castaway game engine."""

__version__ = "0.1.0"
