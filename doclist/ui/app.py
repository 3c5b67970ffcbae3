"""
Textual application hosting the document list.
"""

from __future__ import annotations

import logging

from textual.app import App
from textual.binding import Binding

from ..config.constants import SCREEN_TITLE
from ..database.repository import DocumentRepository, SQLiteDocumentRepository
from .document_list import DocumentListScreen

logger = logging.getLogger(__name__)


class DoclistApp(App[None]):
    """Single-screen app: the document list, plus the screens it pushes."""

    TITLE = SCREEN_TITLE

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, repository: DocumentRepository | None = None, **kwargs):
        super().__init__(**kwargs)
        self.repository = repository if repository is not None else SQLiteDocumentRepository()

    def on_mount(self) -> None:
        self.push_screen(DocumentListScreen(self.repository))


def run_browser(repository: DocumentRepository | None = None) -> None:
    """Run the document list TUI until the user quits."""
    from ..utils.logging_utils import setup_tui_logging

    setup_tui_logging()
    logger.info("Starting document browser")
    DoclistApp(repository).run()
