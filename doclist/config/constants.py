"""
Centralized constants for doclist.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

DOCLIST_CONFIG_DIR = Path.home() / ".config" / "doclist"
DEFAULT_DB_FILENAME = "documents.db"

# Environment variable that overrides the database location
DB_PATH_ENV_VAR = "DOCLIST_DB"

# =============================================================================
# DOCUMENT LIST
# =============================================================================

SCREEN_TITLE = "Documents"
SEARCH_PLACEHOLDER = "Search for name or content"

DEFAULT_SORT_KEY = "name"
SORTABLE_COLUMNS = frozenset({"id", "name", "size", "modified_date"})

# Row rendering
SIZE_SUFFIX = " bytes"
UNKNOWN_DATE = "unknown"

# =============================================================================
# USER-FACING MESSAGES
# =============================================================================

ALERT_TITLE = "Alert"
FETCH_FAILED_MESSAGE = "Fetch for documents could not be performed"
DELETE_FAILED_MESSAGE = "Delete failed"

# =============================================================================
# LOGGING
# =============================================================================

MAX_LOG_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 2
