"""
Document CRUD operations for doclist
"""

from datetime import datetime
from typing import Optional

from ..models.document import Document
from .connection import DatabaseConnection, db_connection
from .types import BY_NAME, SortSpec


def _resolve(connection: Optional[DatabaseConnection]) -> DatabaseConnection:
    return connection if connection is not None else db_connection


def content_size(content: str) -> int:
    """Size of a document body in bytes."""
    return len(content.encode("utf-8"))


def save_document(
    name: str,
    content: str,
    size: Optional[int] = None,
    modified_date: Optional[datetime] = None,
    *,
    connection: Optional[DatabaseConnection] = None,
) -> int:
    """Save a document and return its ID.

    Size defaults to the UTF-8 length of the content and the modified date
    to now.
    """
    if size is None:
        size = content_size(content)
    if modified_date is None:
        modified_date = datetime.now()

    with _resolve(connection).get_connection() as conn:
        cursor = conn.execute(
            """
            INSERT INTO documents (name, content, size, modified_date)
            VALUES (?, ?, ?, ?)
        """,
            (name, content, size, modified_date),
        )

        conn.commit()
        return cursor.lastrowid


def get_document(
    doc_id: int, *, connection: Optional[DatabaseConnection] = None
) -> Optional[Document]:
    """Get a document by ID"""
    with _resolve(connection).get_connection() as conn:
        cursor = conn.execute("SELECT * FROM documents WHERE id = ?", (doc_id,))
        row = cursor.fetchone()

        if row:
            return Document.from_row(row)
        return None


def list_documents(
    sort: SortSpec = BY_NAME, *, connection: Optional[DatabaseConnection] = None
) -> list[Document]:
    """List every document in the given order"""
    with _resolve(connection).get_connection() as conn:
        cursor = conn.execute(
            f"""
            SELECT id, name, content, size, modified_date
            FROM documents
            {sort.order_by()}
        """
        )
        return [Document.from_row(row) for row in cursor.fetchall()]


def update_document(
    doc_id: int,
    name: Optional[str] = None,
    content: Optional[str] = None,
    *,
    connection: Optional[DatabaseConnection] = None,
) -> bool:
    """Update a document's name and/or content, re-stamping size and date"""
    existing = get_document(doc_id, connection=connection)
    if existing is None:
        return False

    new_name = name if name is not None else existing.name
    new_content = content if content is not None else existing.content

    with _resolve(connection).get_connection() as conn:
        cursor = conn.execute(
            """
            UPDATE documents
            SET name = ?, content = ?, size = ?, modified_date = ?
            WHERE id = ?
        """,
            (new_name, new_content, content_size(new_content), datetime.now(), doc_id),
        )

        conn.commit()
        return cursor.rowcount > 0


def delete_document(doc_id: int, *, connection: Optional[DatabaseConnection] = None) -> bool:
    """Permanently delete a document. Returns False if no row was removed."""
    with _resolve(connection).get_connection() as conn:
        cursor = conn.execute("DELETE FROM documents WHERE id = ?", (doc_id,))

        conn.commit()
        return cursor.rowcount > 0


def count_documents(*, connection: Optional[DatabaseConnection] = None) -> int:
    """Count stored documents"""
    with _resolve(connection).get_connection() as conn:
        cursor = conn.execute("SELECT COUNT(*) FROM documents")
        return cursor.fetchone()[0]
