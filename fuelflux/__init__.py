"""Pump controller client with a local SQLite cache and an offline request queue."""

__version__ = "0.1.0"

__all__ = ["__version__"]