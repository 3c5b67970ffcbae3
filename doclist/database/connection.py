"""
Database connection management for doclist
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config.settings import get_db_path

logger = logging.getLogger(__name__)

# Register datetime adapter
sqlite3.register_adapter(datetime, lambda dt: dt.isoformat())
sqlite3.register_converter("timestamp", lambda b: datetime.fromisoformat(b.decode()))


def _casefold(value: Optional[str]) -> Optional[str]:
    return value.casefold() if value is not None else None


class DatabaseConnection:
    """SQLite database connection manager for doclist"""

    def __init__(self, db_path: Optional[Path] = None):
        # Resolved lazily so DOCLIST_DB can be set after import
        self._db_path = db_path

    @property
    def db_path(self) -> Path:
        if self._db_path is None:
            return get_db_path()
        return self._db_path

    @db_path.setter
    def db_path(self, value: Optional[Path]) -> None:
        self._db_path = value

    @contextmanager
    def get_connection(self):
        """Get a database connection with context manager"""
        conn = sqlite3.connect(
            self.db_path, detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES
        )
        conn.row_factory = sqlite3.Row  # Enable column access by name

        # Unicode-aware case folding for search; SQLite's LOWER() is ASCII only
        conn.create_function("casefold", 1, _casefold, deterministic=True)

        try:
            yield conn
        finally:
            conn.close()

    def ensure_schema(self):
        """Ensure the documents table and its indexes exist"""
        with self.get_connection() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS documents (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    content TEXT NOT NULL DEFAULT '',
                    size INTEGER NOT NULL DEFAULT 0,
                    modified_date TIMESTAMP
                )
            """
            )

            conn.execute("CREATE INDEX IF NOT EXISTS idx_documents_name ON documents(name)")

            conn.commit()
        logger.debug("Schema ready at %s", self.db_path)


# Global instance used when no connection is passed explicitly
db_connection = DatabaseConnection()
