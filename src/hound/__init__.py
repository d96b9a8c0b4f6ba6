"""Hound: configuration loading for multi-repository code search."""

__version__ = "0.1.0"
