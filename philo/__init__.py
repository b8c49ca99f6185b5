"""Dining philosophers simulation: argument parsing, the table, and the threaded dinner."""

__version__ = "1.0.0"