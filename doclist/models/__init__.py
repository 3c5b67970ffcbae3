"""Data models for doclist."""

from .document import Document

__all__ = ["Document"]
