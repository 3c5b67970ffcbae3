"""
doclist - searchable, sortable document list backed by SQLite
"""

__version__ = "0.1.0"
