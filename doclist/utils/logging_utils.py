"""Simple logging utilities for doclist.

Standard Logger Initialization Pattern
--------------------------------------
Modules use the standard Python pattern:

    import logging
    logger = logging.getLogger(__name__)

Configuration happens once, at the entry point: ``setup_cli_logging`` for
commands, ``setup_tui_logging`` while the Textual app owns the terminal.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from ..config.constants import DOCLIST_CONFIG_DIR, LOG_BACKUP_COUNT, MAX_LOG_BYTES

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _is_console_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and not isinstance(
        handler, logging.FileHandler
    )


def setup_cli_logging(verbose: bool = False) -> logging.Logger:
    """Log doclist.* records to stderr. WARNING by default, DEBUG when verbose."""
    logger = logging.getLogger("doclist")

    # sys.stderr may have been swapped (and the old one closed) since a
    # previous call, so the console handler is rebuilt every time
    for handler in list(logger.handlers):
        if _is_console_handler(handler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


def setup_tui_logging(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Set up file logging for the TUI.

    Writing to the terminal would draw over the Textual screen, so records go
    to a rotating file instead, and any console handler left on the doclist
    logger by ``setup_cli_logging`` is removed. doclist.* loggers are set to
    INFO; the root logger stays at WARNING to keep third-party noise out.
    """
    doclist_logger = logging.getLogger("doclist")
    for handler in list(doclist_logger.handlers):
        if _is_console_handler(handler):
            doclist_logger.removeHandler(handler)

    try:
        log_dir = log_dir or DOCLIST_CONFIG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "tui_debug.log"

        if not logging.getLogger().handlers:
            handler = RotatingFileHandler(
                log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT
            )
            handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
            logging.basicConfig(level=logging.WARNING, handlers=[handler])

        doclist_logger.setLevel(logging.INFO)
        return doclist_logger

    except OSError as e:
        # Logging is what failed, so report it directly
        print(f"Warning: TUI logging setup failed: {e}", file=sys.stderr)
        return doclist_logger
