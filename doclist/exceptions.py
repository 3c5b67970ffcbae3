"""Custom exception hierarchy for doclist.

Exception Hierarchy:
    DoclistError (base)
    ├── DatabaseError - SQLite/database operations
    │   ├── FetchFailedError (retryable)
    │   └── DeleteFailedError (retryable)
    └── ConfigurationError - Settings/configuration issues

Usage:
    from doclist.exceptions import FetchFailedError

    try:
        # database operation
    except sqlite3.Error as e:
        raise FetchFailedError("Failed to list documents", term=term) from e
"""

from typing import Any, Optional


class DoclistError(Exception):
    """Base exception for all doclist errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., IDs, paths)
        retryable: Whether this error might succeed on retry
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        **context: Any,
    ) -> None:
        self.message = message
        self.context = context
        self.retryable = retryable
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Database Errors
# =============================================================================


class DatabaseError(DoclistError):
    """Base exception for database operations."""

    pass


class FetchFailedError(DatabaseError):
    """A query against the document store failed."""

    def __init__(
        self,
        message: str = "Document fetch failed",
        *,
        term: Optional[str] = None,
        **context: Any,
    ) -> None:
        if term is not None:
            context["term"] = term
        super().__init__(message, retryable=True, **context)


class DeleteFailedError(DatabaseError):
    """Removing a document or committing the removal failed."""

    def __init__(
        self,
        message: str = "Document delete failed",
        *,
        doc_id: Optional[int] = None,
        **context: Any,
    ) -> None:
        if doc_id is not None:
            context["doc_id"] = doc_id
        super().__init__(message, retryable=True, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(DoclistError):
    """Invalid settings or environment."""

    pass
