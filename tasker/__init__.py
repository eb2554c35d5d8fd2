"""Tasker: a small to-do backend over a MongoDB collection."""

__version__ = "1.0.0"
