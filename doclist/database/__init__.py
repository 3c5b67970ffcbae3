"""
doclist Database Package

Database operations split into focused modules:
- connection: Database connection management
- documents: Document CRUD operations
- search: Name/content substring search
- repository: Repository interface used by the document list
"""

from .connection import DatabaseConnection, db_connection
from .documents import (
    content_size,
    count_documents,
    delete_document,
    get_document,
    list_documents,
    save_document,
    update_document,
)
from .repository import DocumentRepository, SQLiteDocumentRepository
from .search import search_documents
from .types import BY_NAME, SortSpec

__all__ = [
    "BY_NAME",
    "DatabaseConnection",
    "DocumentRepository",
    "SQLiteDocumentRepository",
    "SortSpec",
    "content_size",
    "count_documents",
    "db_connection",
    "delete_document",
    "get_document",
    "list_documents",
    "save_document",
    "search_documents",
    "update_document",
]
