"""
Presenters for UI components.

Presenters contain the business logic that transforms data from
the repository into ViewModels for display. They decouple Textual
widgets from database access.
"""

from .document_list_presenter import (
    DeleteResult,
    DocumentListPresenter,
    ErrorKind,
    FetchResult,
    Filtered,
    ListError,
    ListState,
    Unfiltered,
)

__all__ = [
    "DeleteResult",
    "DocumentListPresenter",
    "ErrorKind",
    "FetchResult",
    "Filtered",
    "ListError",
    "ListState",
    "Unfiltered",
]
