"""Configuration for doclist."""

from .settings import get_db_path

__all__ = ["get_db_path"]
