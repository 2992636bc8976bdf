"""Cursor-based pagination primitives for paginated list APIs."""

__version__ = "1.0.0"
