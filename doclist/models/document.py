"""Document record model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any


def _parse_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, bytes):
        value = value.decode()
    return datetime.fromisoformat(str(value))


@dataclass(frozen=True)
class Document:
    """One stored document.

    Instances are detached snapshots of a row; holding one does not keep
    the row alive or lock it.
    """

    id: int
    name: str
    content: str
    size: int
    modified_date: datetime | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Document:
        """Build a Document from a sqlite3.Row or plain dict."""
        return cls(
            id=row["id"],
            name=row["name"],
            content=row["content"] or "",
            size=row["size"] or 0,
            modified_date=_parse_datetime(row["modified_date"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "content": self.content,
            "size": self.size,
            "modified_date": self.modified_date.isoformat() if self.modified_date else None,
        }
