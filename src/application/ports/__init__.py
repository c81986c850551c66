"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import (
    CurrencyRow,
    LedgerRepositoryPort,
    PostingHeaderRow,
    PostingLineRow,
    PriorPostingRow,
)

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "CurrencyRow",
    "PostingHeaderRow",
    "PostingLineRow",
    "PriorPostingRow",
]
