"""
ViewModels for the document list and detail views.

These are lightweight data transfer objects that contain all the data
needed to render the UI, with display formatting already applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models.document import Document
from .formatting import format_modified, format_size


@dataclass(frozen=True)
class DocumentRowVM:
    """ViewModel for a single row in the document list."""

    id: int
    name: str
    size_text: str  # e.g. "100 bytes"
    modified_text: str  # medium date/time or "unknown"

    @classmethod
    def from_document(cls, doc: Document) -> DocumentRowVM:
        return cls(
            id=doc.id,
            name=doc.name,
            size_text=format_size(doc.size),
            modified_text=format_modified(doc.modified_date),
        )


@dataclass(frozen=True)
class DocumentListVM:
    """ViewModel for the document list."""

    rows: list[DocumentRowVM] = field(default_factory=list)
    search_term: str = ""
    is_filtered: bool = False
    status_text: str = ""


@dataclass(frozen=True)
class DocumentDetailVM:
    """ViewModel for the document detail screen."""

    id: int
    name: str
    content: str
    size_text: str
    modified_text: str
    line_count: int = 0

    @classmethod
    def from_document(cls, doc: Document) -> DocumentDetailVM:
        return cls(
            id=doc.id,
            name=doc.name,
            content=doc.content,
            size_text=format_size(doc.size),
            modified_text=format_modified(doc.modified_date),
            line_count=doc.content.count("\n") + 1 if doc.content else 0,
        )
