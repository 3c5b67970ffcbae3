"""Display formatting for document rows."""

from __future__ import annotations

from datetime import datetime

from ..config.constants import SIZE_SUFFIX, UNKNOWN_DATE


def format_size(size: int) -> str:
    """Render a byte count, e.g. ``"100 bytes"``."""
    return f"{size}{SIZE_SUFFIX}"


def format_medium_datetime(value: datetime) -> str:
    """Medium date and time style, e.g. ``"Jul 9, 2018 at 3:42:17 PM"``."""
    hour = value.hour % 12 or 12
    return (
        f"{value:%b} {value.day}, {value.year} at "
        f"{hour}:{value:%M}:{value:%S} {value:%p}"
    )


def format_modified(value: datetime | None) -> str:
    if value is None:
        return UNKNOWN_DATE
    return format_medium_datetime(value)
