"""
Modal screens for the doclist TUI.
"""

import logging

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label

from ..config.constants import ALERT_TITLE

logger = logging.getLogger(__name__)


class AlertScreen(ModalScreen[None]):
    """Dismiss-only alert used to report store failures."""

    DEFAULT_CSS = """
    AlertScreen {
        align: center middle;
    }

    #alert-dialog {
        padding: 1 2;
        width: 60;
        height: auto;
        border: thick $error 80%;
        background: $surface;
    }

    #alert-title {
        text-style: bold;
        width: 100%;
        content-align: center middle;
    }

    #alert-message {
        width: 100%;
        margin: 1 0;
        content-align: center middle;
    }

    #alert-ok {
        width: 100%;
    }
    """

    BINDINGS = [
        ("escape", "dismiss_alert", "OK"),
        ("enter", "dismiss_alert", "OK"),
    ]

    def __init__(self, message: str, title: str = ALERT_TITLE):
        super().__init__()
        self.title_text = title
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="alert-dialog"):
            yield Label(self.title_text, id="alert-title")
            yield Label(self.message, id="alert-message", markup=False)
            yield Button("OK", variant="primary", id="alert-ok")

    def on_mount(self) -> None:
        logger.info(f"Alert shown: {self.message}")
        self.query_one("#alert-ok", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_dismiss_alert()

    def action_dismiss_alert(self) -> None:
        logger.debug("OK selected")
        self.dismiss(None)
