"""Classic sorting and string algorithms."""

__version__ = "0.1.0"