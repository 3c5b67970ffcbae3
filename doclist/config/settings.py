"""Configuration utilities for doclist."""

import os
from pathlib import Path

from ..exceptions import ConfigurationError
from .constants import DB_PATH_ENV_VAR, DEFAULT_DB_FILENAME, DOCLIST_CONFIG_DIR


def get_db_path() -> Path:
    """Get the database path, respecting the DOCLIST_DB environment variable.

    Tests set DOCLIST_DB to a temp file path so they never touch the
    real database.
    """
    override = os.environ.get(DB_PATH_ENV_VAR)
    if override is not None:
        if not override.strip():
            raise ConfigurationError(f"{DB_PATH_ENV_VAR} is set but empty")
        return Path(override).expanduser()

    DOCLIST_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return DOCLIST_CONFIG_DIR / DEFAULT_DB_FILENAME
