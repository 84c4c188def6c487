"""Clamped big-endian integer conversion and a lock-protected ordered list."""

__version__ = "0.1.0"
__all__ = ["converter", "linked_list"]