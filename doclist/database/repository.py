"""
Repository interface over the document store.

The list presenter depends only on ``DocumentRepository``; the SQLite
implementation below adapts the function-level database API to it and
translates ``sqlite3`` failures, and an unusable database path, into
doclist exceptions.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Protocol

from ..exceptions import ConfigurationError, DeleteFailedError, FetchFailedError
from ..models.document import Document
from .connection import DatabaseConnection, db_connection
from .documents import delete_document, list_documents
from .search import search_documents
from .types import BY_NAME, SortSpec

logger = logging.getLogger(__name__)


class DocumentRepository(Protocol):
    """What the document list needs from storage."""

    def list(self, sort: SortSpec = BY_NAME) -> list[Document]:
        """Return every document. Raises FetchFailedError."""
        ...

    def search(self, term: str, sort: SortSpec = BY_NAME) -> list[Document]:
        """Return documents matching term. Raises FetchFailedError."""
        ...

    def delete(self, doc_id: int) -> None:
        """Remove a document and commit. Raises DeleteFailedError."""
        ...


class SQLiteDocumentRepository:
    """DocumentRepository backed by a DatabaseConnection."""

    def __init__(self, connection: DatabaseConnection | None = None):
        self.connection = connection if connection is not None else db_connection

    def list(self, sort: SortSpec = BY_NAME) -> list[Document]:
        try:
            return list_documents(sort, connection=self.connection)
        except (sqlite3.Error, ConfigurationError) as e:
            logger.error(f"Error listing documents: {e}")
            raise FetchFailedError("Failed to list documents", sort=sort.key) from e

    def search(self, term: str, sort: SortSpec = BY_NAME) -> list[Document]:
        try:
            return search_documents(term, sort, connection=self.connection)
        except (sqlite3.Error, ConfigurationError) as e:
            logger.error(f"Error searching documents: {e}")
            raise FetchFailedError("Failed to search documents", term=term) from e

    def delete(self, doc_id: int) -> None:
        try:
            removed = delete_document(doc_id, connection=self.connection)
        except (sqlite3.Error, ConfigurationError) as e:
            logger.error(f"Error deleting document #{doc_id}: {e}")
            raise DeleteFailedError("Failed to delete document", doc_id=doc_id) from e
        if not removed:
            raise DeleteFailedError("Document no longer exists", doc_id=doc_id)
        logger.info(f"Deleted document #{doc_id}")
