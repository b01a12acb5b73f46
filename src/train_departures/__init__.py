"""Departure board for a single train station."""

__version__ = "0.1.0"
