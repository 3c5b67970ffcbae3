"""Utility helpers for doclist."""
