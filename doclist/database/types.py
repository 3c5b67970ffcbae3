"""Type definitions for the database layer."""

from __future__ import annotations

from dataclasses import dataclass

from ..config.constants import DEFAULT_SORT_KEY, SORTABLE_COLUMNS


@dataclass(frozen=True)
class SortSpec:
    """Ordering for a document fetch."""

    key: str = DEFAULT_SORT_KEY
    ascending: bool = True

    def __post_init__(self) -> None:
        if self.key not in SORTABLE_COLUMNS:
            raise ValueError(
                f"Cannot sort by {self.key!r}. Valid keys: {', '.join(sorted(SORTABLE_COLUMNS))}"
            )

    def order_by(self) -> str:
        """SQL ORDER BY clause, with id as a stable tie-breaker."""
        direction = "ASC" if self.ascending else "DESC"
        if self.key == "id":
            return f"ORDER BY id {direction}"
        return f"ORDER BY {self.key} {direction}, id {direction}"


BY_NAME = SortSpec()
