"""
Search functionality for doclist documents
"""

from typing import Optional

from ..models.document import Document
from .connection import DatabaseConnection, db_connection
from .types import BY_NAME, SortSpec


def search_documents(
    term: str,
    sort: SortSpec = BY_NAME,
    *,
    connection: Optional[DatabaseConnection] = None,
) -> list[Document]:
    """Find documents whose name or content contains the term.

    Matching is a case-insensitive substring test. The term is compared
    literally, so characters such as % and _ have no special meaning.

    Args:
        term: The text to look for
        sort: Ordering of the results

    Returns:
        Matching documents, possibly empty
    """
    needle = term.casefold()
    conn_manager = connection if connection is not None else db_connection

    with conn_manager.get_connection() as conn:
        cursor = conn.execute(
            f"""
            SELECT id, name, content, size, modified_date
            FROM documents
            WHERE instr(casefold(name), ?) > 0
               OR instr(casefold(content), ?) > 0
            {sort.order_by()}
        """,
            (needle, needle),
        )
        return [Document.from_row(row) for row in cursor.fetchall()]
