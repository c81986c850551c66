"""Projection of ledger rows into display and export tables.

The projection only formats values computed by the use cases. Opening and
closing balance records are synthetic rows added here so they never take
part in searching, filtering or sorting.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import (
    CLOSING_BALANCE_LABEL,
    DISPLAY_DOCUMENT,
    OPENING_BALANCE_LABEL,
)
from src.domain.models import LedgerTable, MergedTransaction, OpeningBalance

LOCAL_COLUMNS = (
    "Date",
    "Transaction Type",
    "Description",
    "Debit",
    "Credit",
    "Balance",
)
DOCUMENT_COLUMNS = (
    "Date",
    "Transaction Type",
    "Description",
    "Currency",
    "Exchange Rate",
    "Doc. Amount",
    "Debit",
    "Credit",
    "Balance",
)


def format_amount(value: Decimal) -> str:
    """Format an amount with thousands separators and two decimals."""
    return f"{value:,.2f}"


def format_rate(value: Decimal) -> str:
    """Format an exchange rate with four decimals."""
    return f"{value:.4f}"


def _optional_amount(value: Decimal) -> str:
    return format_amount(value) if value != 0 else ""


def columns_for(display_mode: str) -> tuple[str, ...]:
    """Return the visible columns for a display mode."""
    if display_mode == DISPLAY_DOCUMENT:
        return DOCUMENT_COLUMNS
    return LOCAL_COLUMNS


def _balance_record(
    label: str,
    balance: Decimal,
    columns: tuple[str, ...],
) -> dict[str, str]:
    record = {column: "" for column in columns}
    record["Date"] = label
    if balance > 0:
        record["Debit"] = format_amount(balance)
    elif balance < 0:
        record["Credit"] = format_amount(abs(balance))
    record["Balance"] = format_amount(balance)
    return record


def _transaction_record(
    row: MergedTransaction,
    columns: tuple[str, ...],
) -> dict[str, str]:
    values = {
        "Date": row.date_label,
        "Transaction Type": row.transaction_type,
        "Description": row.narration,
        "Currency": row.currency_code,
        "Exchange Rate": format_rate(row.exchange_rate),
        "Doc. Amount": format_amount(row.document_currency_amount),
        "Debit": _optional_amount(row.debit),
        "Credit": _optional_amount(row.credit),
        "Balance": format_amount(row.running_balance),
    }
    return {column: values[column] for column in columns}


def project(
    rows: Sequence[MergedTransaction],
    opening_balance: OpeningBalance,
    display_mode: str,
    closing_balance: Decimal | None = None,
) -> LedgerTable:
    """Build the table rendered on screen and handed to exporters.

    Args:
        rows: Rows in display order, already searched, filtered and sorted.
        opening_balance: Opening balance of the report.
        display_mode: ``local`` or ``document``.
        closing_balance: Closing balance of the full report; defaults to the
            last row's running balance, or the opening balance when empty.

    Returns:
        LedgerTable: Columns and string records, opening balance first and
        closing balance last.
    """
    columns = columns_for(display_mode)
    if closing_balance is None:
        closing_balance = (
            rows[-1].running_balance if rows else opening_balance.balance
        )
    records = [
        _balance_record(
            OPENING_BALANCE_LABEL,
            opening_balance.balance,
            columns,
        )
    ]
    records.extend(_transaction_record(row, columns) for row in rows)
    records.append(
        _balance_record(CLOSING_BALANCE_LABEL, closing_balance, columns)
    )
    return LedgerTable(
        columns=columns,
        records=records,
        display_mode=display_mode,
    )


__all__ = [
    "LOCAL_COLUMNS",
    "DOCUMENT_COLUMNS",
    "columns_for",
    "format_amount",
    "format_rate",
    "project",
]
