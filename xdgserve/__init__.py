"""Serve static files from one directory, one connection at a time."""

__version__ = "0.1.0"
