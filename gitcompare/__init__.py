"""Fetch Git repositories and compare commits."""

__version__ = "0.1.0"
