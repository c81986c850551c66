"""Domain package for ledger rules and core models."""

from .constants import DISPLAY_DOCUMENT, DISPLAY_LOCAL, POSTED_STATUS
from .errors import (
    InvalidRangeError,
    LedgerError,
    QueryFailureError,
    ReferentialGapError,
)
from .models import (
    AccountDTO,
    ColumnFilter,
    DateRangeSelection,
    DateWindow,
    GeneralLedgerReport,
    LedgerViewState,
    MergedTransaction,
    OpeningBalance,
    SortSpec,
)
from .policies import filter_accounts
from .services import (
    CurrencyResolver,
    assemble_postings,
    compute_opening_balance,
    derive_view,
    resolve_date_window,
    toggle_sort,
)

__all__ = [
    "DISPLAY_DOCUMENT",
    "DISPLAY_LOCAL",
    "POSTED_STATUS",
    "InvalidRangeError",
    "LedgerError",
    "QueryFailureError",
    "ReferentialGapError",
    "AccountDTO",
    "ColumnFilter",
    "DateRangeSelection",
    "DateWindow",
    "GeneralLedgerReport",
    "LedgerViewState",
    "MergedTransaction",
    "OpeningBalance",
    "SortSpec",
    "filter_accounts",
    "CurrencyResolver",
    "assemble_postings",
    "compute_opening_balance",
    "derive_view",
    "resolve_date_window",
    "toggle_sort",
]
