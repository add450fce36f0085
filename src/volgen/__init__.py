"""Synthetic row-volume generator."""

__version__ = "0.1.0"
