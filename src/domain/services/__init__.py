"""Domain services package."""

from .currency import CurrencyResolver
from .date_window import resolve_date_window, subtract_months
from .ledger_view import (
    derive_view,
    derive_view_from_state,
    field_text,
    toggle_sort,
)
from .normalization import normalize_code, normalize_text
from .opening_balance import compute_opening_balance
from .posting_assembler import assemble_postings
from .validation import validate_posting_sides

__all__ = [
    "CurrencyResolver",
    "resolve_date_window",
    "subtract_months",
    "derive_view",
    "derive_view_from_state",
    "field_text",
    "toggle_sort",
    "normalize_code",
    "normalize_text",
    "compute_opening_balance",
    "assemble_postings",
    "validate_posting_sides",
]
