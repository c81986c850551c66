"""View state models driving search, filters and sorting."""

from dataclasses import dataclass, field, replace
from typing import Any

from src.domain.constants import (
    FILTER_COLUMNS,
    SEARCH_ALL,
    SEARCH_COLUMNS,
    SORT_ASCENDING,
    SORT_COLUMNS,
    SORT_DESCENDING,
)


@dataclass(frozen=True)
class ColumnFilter:
    """Case-insensitive substring filter on one transaction field."""

    column: str
    value: str

    def __post_init__(self) -> None:
        if self.column not in FILTER_COLUMNS:
            raise ValueError(f"Unknown filter column: {self.column}")


@dataclass(frozen=True)
class SortSpec:
    """Active sort column and direction."""

    column: str = "date"
    direction: str = SORT_DESCENDING

    def __post_init__(self) -> None:
        if self.column not in SORT_COLUMNS:
            raise ValueError(f"Unknown sort column: {self.column}")
        if self.direction not in (SORT_ASCENDING, SORT_DESCENDING):
            raise ValueError(f"Unknown sort direction: {self.direction}")

    @property
    def descending(self) -> bool:
        return self.direction == SORT_DESCENDING

    def toggled(self, column: str) -> "SortSpec":
        """Return the spec after a click on ``column``.

        The active column flips direction; any other column becomes active
        in ascending order.
        """
        if column == self.column:
            direction = (
                SORT_ASCENDING if self.descending else SORT_DESCENDING
            )
            return replace(self, direction=direction)
        return SortSpec(column=column, direction=SORT_ASCENDING)


@dataclass(frozen=True)
class LedgerViewState:
    """Search, filter and sort inputs owned by a report session.

    Attributes:
        search_text: Free text searched case-insensitively.
        search_column: ``all`` or one searchable column.
        column_filters: Filters combined with AND.
        sort: Active sort specification.
    """

    search_text: str = ""
    search_column: str = SEARCH_ALL
    column_filters: tuple[ColumnFilter, ...] = ()
    sort: SortSpec = field(default_factory=SortSpec)

    def __post_init__(self) -> None:
        if self.search_column not in SEARCH_COLUMNS:
            raise ValueError(f"Unknown search column: {self.search_column}")

    def with_filter(self, column: str, value: str) -> "LedgerViewState":
        """Return a state where ``column`` is filtered by ``value``.

        An empty value removes the filter on that column.
        """
        remaining = tuple(
            item for item in self.column_filters if item.column != column
        )
        if value:
            remaining = (*remaining, ColumnFilter(column=column, value=value))
        return replace(self, column_filters=remaining)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation."""
        return {
            "search_text": self.search_text,
            "search_column": self.search_column,
            "column_filters": [
                {"column": item.column, "value": item.value}
                for item in self.column_filters
            ],
            "sort": {
                "column": self.sort.column,
                "direction": self.sort.direction,
            },
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "LedgerViewState":
        """Rebuild a state from ``to_dict`` output."""
        sort_payload = payload.get("sort") or {}
        return cls(
            search_text=payload.get("search_text", ""),
            search_column=payload.get("search_column", SEARCH_ALL),
            column_filters=tuple(
                ColumnFilter(column=item["column"], value=item["value"])
                for item in payload.get("column_filters", [])
            ),
            sort=SortSpec(**sort_payload),
        )


__all__ = ["ColumnFilter", "SortSpec", "LedgerViewState"]
