"""
DocumentListScreen - searchable, deletable list of documents.

Features:
- Name-sorted document table (name, size, modified date)
- Live search across name and content on every keystroke
- Row deletion, persisted through the repository
- Enter on a row opens the detail screen

The list is re-fetched every time the screen becomes active, so it
always reflects the latest store contents.
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Input, Static

from ..config.constants import SCREEN_TITLE, SEARCH_PLACEHOLDER
from ..database.repository import DocumentRepository
from .document_detail import DocumentDetailScreen
from .modals import AlertScreen
from .presenters import DocumentListPresenter, ListError
from .viewmodels import DocumentListVM

logger = logging.getLogger(__name__)


class DocumentListScreen(Screen[None]):
    """Table of documents with a search bar above it."""

    DEFAULT_CSS = """
    DocumentListScreen #doc-search {
        dock: top;
        margin: 0 0 1 0;
    }

    DocumentListScreen #doc-table {
        height: 1fr;
    }

    DocumentListScreen #doc-status {
        height: 1;
        background: $boost;
        color: $text;
        padding: 0 1;
        dock: bottom;
    }
    """

    BINDINGS = [
        Binding("d", "delete_document", "Delete"),
        Binding("delete", "delete_document", "Delete", show=False),
        Binding("slash", "focus_search", "Search"),
        Binding("escape", "clear_search", "Clear search"),
        Binding("r", "refresh", "Refresh", show=False),
    ]

    def __init__(self, repository: DocumentRepository, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.presenter = DocumentListPresenter(
            repository,
            on_list_update=self._on_list_update,
        )
        # Dismissing an alert resumes this screen; that must not re-fetch
        self._skip_next_resume = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder=SEARCH_PLACEHOLDER, id="doc-search")
        yield DataTable(id="doc-table", cursor_type="row", zebra_stripes=True)
        yield Static("", id="doc-status", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.title = SCREEN_TITLE
        self._ensure_columns(self.query_one("#doc-table", DataTable))
        logger.info("DocumentListScreen mounted")

    def on_screen_resume(self) -> None:
        """Reload on every appearance, including return from the detail screen."""
        if self._skip_next_resume:
            self._skip_next_resume = False
            return
        self._run_fetch(self.presenter.refresh)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _ensure_columns(self, table: DataTable) -> None:
        if not table.columns:
            table.add_column("Name", key="name")
            table.add_column("Size", key="size")
            table.add_column("Modified", key="modified")

    def _on_list_update(self, vm: DocumentListVM) -> None:
        self.update_status(vm.status_text)

    def _render_table(self) -> None:
        """Rebuild every row from the presenter's current list."""
        table = self.query_one("#doc-table", DataTable)
        self._ensure_columns(table)
        table.clear()
        for index in range(self.presenter.row_count):
            row = self.presenter.row_at(index)
            table.add_row(Text(row.name), row.size_text, row.modified_text, key=str(row.id))

    def update_status(self, message: str) -> None:
        self.query_one("#doc-status", Static).update(message)

    def _show_error(self, error: ListError) -> None:
        self._skip_next_resume = True
        self.app.push_screen(AlertScreen(error.message))

    def _run_fetch(self, fetch, *args) -> None:
        result = fetch(*args)
        if not result.ok:
            self._show_error(result.error)
            return
        self._render_table()

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        """Runs every time the search text is altered."""
        if event.input.id != "doc-search":
            return
        self._run_fetch(self.presenter.search, event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "doc-search":
            self.query_one("#doc-table", DataTable).focus()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        document = self.presenter.document_at(event.cursor_row)
        if document is None:
            return
        logger.info(f"Opening document #{document.id}")
        self.app.push_screen(DocumentDetailScreen(document))

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_delete_document(self) -> None:
        """Delete the highlighted document."""
        table = self.query_one("#doc-table", DataTable)
        if self.presenter.row_count == 0:
            self.update_status("No document selected")
            return

        index = table.cursor_row
        result = self.presenter.delete_at(index)
        if not result.ok:
            self._show_error(result.error)
            self._render_table()
            return

        if result.deleted is not None:
            table.remove_row(str(result.deleted.id))
            self.update_status(f"Deleted '{result.deleted.name}'")

    def action_focus_search(self) -> None:
        self.query_one("#doc-search", Input).focus()

    def action_clear_search(self) -> None:
        search = self.query_one("#doc-search", Input)
        if search.value:
            # Input.Changed triggers the unfiltered fetch
            search.value = ""
        self.query_one("#doc-table", DataTable).focus()

    def action_refresh(self) -> None:
        self._run_fetch(self.presenter.refresh)

