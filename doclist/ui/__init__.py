"""Textual user interface for doclist."""
