"""Procedurally grown, horizontally scrolling circuit board animation."""

__version__ = "0.1.0"
