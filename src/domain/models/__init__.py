"""Domain models package."""

from .accounts import AccountDTO
from .ledger import (
    DateRangeSelection,
    DateWindow,
    GeneralLedgerReport,
    LedgerTable,
    MergedTransaction,
    OpeningBalance,
)
from .ledger_rows import (
    CurrencyRow,
    PostingHeaderRow,
    PostingLineRow,
    PriorPostingRow,
)
from .view_state import ColumnFilter, LedgerViewState, SortSpec

__all__ = [
    "AccountDTO",
    "DateRangeSelection",
    "DateWindow",
    "GeneralLedgerReport",
    "LedgerTable",
    "MergedTransaction",
    "OpeningBalance",
    "CurrencyRow",
    "PostingHeaderRow",
    "PostingLineRow",
    "PriorPostingRow",
    "ColumnFilter",
    "LedgerViewState",
    "SortSpec",
]
