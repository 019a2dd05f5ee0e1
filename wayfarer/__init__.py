"""Wayfarer: a small turn-based text adventure."""

__version__ = "0.1.0"
