"""CLI command modules for doclist."""
