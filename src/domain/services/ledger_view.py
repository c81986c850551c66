"""Search, filter and sort over assembled ledger rows.

Every function here is pure: the input sequence is never mutated and running
balances are displayed exactly as assembled, whatever the display order.
"""

from collections.abc import Callable, Iterable, Sequence
from decimal import Decimal

from src.domain.constants import SEARCH_ALL
from src.domain.models import (
    ColumnFilter,
    LedgerViewState,
    MergedTransaction,
    SortSpec,
)
from src.domain.services.normalization import normalize_text
from src.utils.decimal_utils import decimal_text


def field_text(row: MergedTransaction, column: str) -> str:
    """Return the text representation of a filterable field.

    Args:
        row: Ledger row.
        column: One of the filter columns.

    Returns:
        str: Date label for ``date``, plain number text for amounts.
    """
    if column == "date":
        return row.date_label
    value = getattr(row, column)
    if isinstance(value, Decimal):
        return decimal_text(value)
    return str(value)


def _search_fields(row: MergedTransaction, column: str) -> tuple[str, ...]:
    if column == "date":
        return (row.date_label,)
    if column == "type":
        return (row.transaction_type,)
    if column == "narration":
        return (row.narration,)
    if column == "currency":
        return (row.currency_code,)
    if column == "amount":
        return (decimal_text(row.debit), decimal_text(row.credit))
    return (
        row.date_label,
        row.transaction_type,
        row.narration,
        row.currency_code,
        decimal_text(row.debit),
        decimal_text(row.credit),
    )


def matches_search(
    row: MergedTransaction,
    search_text: str,
    search_column: str = SEARCH_ALL,
) -> bool:
    """Return True when ``row`` contains ``search_text`` in the column."""
    if not search_text:
        return True
    needle = normalize_text(search_text)
    return any(
        needle in normalize_text(value)
        for value in _search_fields(row, search_column)
    )


def matches_filters(
    row: MergedTransaction,
    column_filters: Iterable[ColumnFilter],
) -> bool:
    """Return True when ``row`` satisfies every column filter."""
    return all(
        normalize_text(item.value) in normalize_text(field_text(row, item.column))
        for item in column_filters
    )


_SORT_KEYS: dict[str, Callable[[MergedTransaction], object]] = {
    "date": lambda row: row.transaction_date,
    "type": lambda row: normalize_text(row.transaction_type),
    "narration": lambda row: normalize_text(row.narration),
    "currency": lambda row: normalize_text(row.currency_code),
    "rate": lambda row: row.exchange_rate,
    "debit": lambda row: row.debit,
    "credit": lambda row: row.credit,
    "balance": lambda row: row.running_balance,
}


def sort_rows(
    rows: Iterable[MergedTransaction],
    sort_spec: SortSpec,
) -> list[MergedTransaction]:
    """Sort rows by one column, keeping equal keys in their input order."""
    return sorted(
        rows,
        key=_SORT_KEYS[sort_spec.column],
        reverse=sort_spec.descending,
    )


def toggle_sort(sort_spec: SortSpec, column: str) -> SortSpec:
    """Return the sort spec after the user clicks ``column``."""
    return sort_spec.toggled(column)


def derive_view(
    postings: Sequence[MergedTransaction],
    search_text: str = "",
    search_column: str = SEARCH_ALL,
    column_filters: Iterable[ColumnFilter] = (),
    sort_spec: SortSpec | None = None,
) -> list[MergedTransaction]:
    """Derive the displayed rows from assembled postings.

    Args:
        postings: Rows produced by the posting assembler.
        search_text: Free text; empty keeps every row.
        search_column: ``all`` or a single searchable column.
        column_filters: Filters that must all match.
        sort_spec: Active sort; defaults to date descending.

    Returns:
        list[MergedTransaction]: New list of matching rows in display order.
    """
    filters = tuple(column_filters)
    visible = [
        row
        for row in postings
        if matches_search(row, search_text, search_column)
        and matches_filters(row, filters)
    ]
    return sort_rows(visible, sort_spec or SortSpec())


def derive_view_from_state(
    postings: Sequence[MergedTransaction],
    view_state: LedgerViewState,
) -> list[MergedTransaction]:
    """Apply a ``LedgerViewState`` to assembled postings."""
    return derive_view(
        postings,
        search_text=view_state.search_text,
        search_column=view_state.search_column,
        column_filters=view_state.column_filters,
        sort_spec=view_state.sort,
    )


__all__ = [
    "field_text",
    "matches_search",
    "matches_filters",
    "sort_rows",
    "toggle_sort",
    "derive_view",
    "derive_view_from_state",
]
