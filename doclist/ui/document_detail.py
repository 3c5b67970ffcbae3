"""
Read-only detail screen for a single document.
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ..models.document import Document
from .viewmodels import DocumentDetailVM

logger = logging.getLogger(__name__)


class DocumentDetailScreen(Screen[None]):
    """Shows the document handed over from the list."""

    DEFAULT_CSS = """
    DocumentDetailScreen #detail-meta {
        height: auto;
        padding: 0 1;
        border-bottom: solid $primary;
    }

    DocumentDetailScreen #detail-content {
        padding: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("q", "back", "Back", show=False),
    ]

    def __init__(self, document: Document):
        super().__init__()
        self.document = document
        self.detail = DocumentDetailVM.from_document(document)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(
            f"Size: {self.detail.size_text}\n"
            f"Modified: {self.detail.modified_text}\n"
            f"Lines: {self.detail.line_count}",
            id="detail-meta",
            markup=False,
        )
        with VerticalScroll():
            yield Static(self.detail.content, id="detail-content", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.detail.name
        logger.info(f"Showing document #{self.detail.id}")

    def action_back(self) -> None:
        self.dismiss(None)
