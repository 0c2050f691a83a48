"""Wrapping 32-bit TCP sequence numbers and conversion to absolute sequence numbers."""

__version__ = "0.1.0"
__all__ = ["wrapping"]