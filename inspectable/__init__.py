"""Visitor-based inspection of struct-, enum- and list-like values, with option checking."""

__version__ = "0.1.0"

__all__ = ["__version__"]