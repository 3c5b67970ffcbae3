"""
Presenter for the document list screen.

This presenter handles business logic for the document list:
- Loading the full list sorted by name
- Live name/content search
- Deleting a row and keeping the in-memory list in step with the store
- Resolving a row to the document handed to the detail screen

The list is held as a single tagged state, either ``Unfiltered`` or
``Filtered``; rendering, selection and deletion all read it through
``documents``. Store failures never escape: they come back as typed
results that the view renders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from doclist.config.constants import DELETE_FAILED_MESSAGE, FETCH_FAILED_MESSAGE
from doclist.database.repository import DocumentRepository
from doclist.database.types import BY_NAME, SortSpec
from doclist.exceptions import DeleteFailedError, FetchFailedError
from doclist.models.document import Document

from ..viewmodels import DocumentListVM, DocumentRowVM

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# List state
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Unfiltered:
    """No search term: every document."""

    documents: tuple[Document, ...] = ()


@dataclass(frozen=True)
class Filtered:
    """Documents matching a non-empty search term."""

    term: str
    documents: tuple[Document, ...] = ()


ListState = Union[Unfiltered, Filtered]


# -----------------------------------------------------------------------------
# Results
# -----------------------------------------------------------------------------


class ErrorKind(Enum):
    FETCH_FAILED = "fetch_failed"
    DELETE_FAILED = "delete_failed"


@dataclass(frozen=True)
class ListError:
    """A failure to report to the user."""

    kind: ErrorKind
    message: str
    cause: Optional[Exception] = field(default=None, compare=False)


@dataclass(frozen=True)
class FetchResult:
    error: Optional[ListError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DeleteResult:
    index: int
    deleted: Optional[Document] = None
    error: Optional[ListError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DocumentListPresenter:
    """Presenter for document list business logic."""

    def __init__(
        self,
        repository: DocumentRepository,
        on_list_update: Optional[Callable[[DocumentListVM], None]] = None,
        sort: SortSpec = BY_NAME,
    ):
        """Initialize the presenter.

        Args:
            repository: Storage the list reads from and deletes through
            on_list_update: Optional callback when the list changes
            sort: Ordering for every fetch
        """
        self.repository = repository
        self.on_list_update = on_list_update
        self.sort = sort
        self._state: ListState = Unfiltered()

    # -------------------------------------------------------------------------
    # State access
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ListState:
        return self._state

    @property
    def documents(self) -> tuple[Document, ...]:
        """The authoritative list for rendering, selection and deletion."""
        return self._state.documents

    @property
    def search_term(self) -> str:
        if isinstance(self._state, Filtered):
            return self._state.term
        return ""

    @property
    def is_filtered(self) -> bool:
        return isinstance(self._state, Filtered)

    @property
    def row_count(self) -> int:
        return len(self._state.documents)

    def row_at(self, index: int) -> DocumentRowVM:
        """Display values for the row at index. Raises IndexError."""
        return DocumentRowVM.from_document(self._state.documents[index])

    def document_at(self, index: int) -> Optional[Document]:
        """Document to hand to the detail screen, or None if out of range."""
        if 0 <= index < len(self._state.documents):
            return self._state.documents[index]
        return None

    def _create_list_vm(self) -> DocumentListVM:
        rows = [DocumentRowVM.from_document(doc) for doc in self._state.documents]
        if self.is_filtered:
            status_text = f"{len(rows)} matching '{self.search_term}'"
        else:
            status_text = f"{len(rows)} docs"
        return DocumentListVM(
            rows=rows,
            search_term=self.search_term,
            is_filtered=self.is_filtered,
            status_text=status_text,
        )

    def _notify(self) -> None:
        if self.on_list_update is not None:
            self.on_list_update(self._create_list_vm())

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def search(self, term: str) -> FetchResult:
        """Re-fetch for a search term; an empty term lists everything.

        On failure the previous state is kept untouched.
        """
        try:
            if term == "":
                new_state: ListState = Unfiltered(tuple(self.repository.list(self.sort)))
            else:
                new_state = Filtered(term, tuple(self.repository.search(term, self.sort)))
        except FetchFailedError as e:
            logger.error(f"Error fetching documents: {e}")
            return FetchResult(
                error=ListError(ErrorKind.FETCH_FAILED, FETCH_FAILED_MESSAGE, cause=e)
            )

        self._state = new_state
        logger.debug(f"Fetched {len(new_state.documents)} documents (term={term!r})")
        self._notify()
        return FetchResult()

    def refresh(self) -> FetchResult:
        """Re-run the fetch for the current term. Called on every appearance."""
        return self.search(self.search_term)

    def clear_search(self) -> FetchResult:
        return self.search("")

    def delete_at(self, index: int) -> DeleteResult:
        """Delete the document at index of the authoritative list.

        On success the row is dropped from the current state at the same
        position. On failure the state is unchanged.
        """
        doc = self.document_at(index)
        if doc is None:
            logger.warning(f"Delete requested for out-of-range row {index}")
            return DeleteResult(index=index)

        try:
            self.repository.delete(doc.id)
        except DeleteFailedError as e:
            logger.error(f"Error deleting document #{doc.id}: {e}")
            return DeleteResult(
                index=index,
                error=ListError(ErrorKind.DELETE_FAILED, DELETE_FAILED_MESSAGE, cause=e),
            )

        remaining = self._state.documents[:index] + self._state.documents[index + 1 :]
        if isinstance(self._state, Filtered):
            self._state = Filtered(self._state.term, remaining)
        else:
            self._state = Unfiltered(remaining)

        self._notify()
        return DeleteResult(index=index, deleted=doc)
