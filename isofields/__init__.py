"""Padding, length prefixes, tag sorting and network length headers for ISO 8583 style fields."""

__version__ = "0.1.0"