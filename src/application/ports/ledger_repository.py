"""Application port for read-only ledger data access."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from src.domain.models import (
    AccountDTO,
    CurrencyRow,
    PostingHeaderRow,
    PostingLineRow,
    PriorPostingRow,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing the queries behind the general ledger report.

    Implementations raise ``QueryFailureError`` when the store cannot answer.
    """

    def fetch_active_accounts(self) -> list[AccountDTO]:
        """Return active accounts ordered by code."""

    def fetch_currencies(self) -> list[CurrencyRow]:
        """Return every currency reference."""

    def fetch_prior_postings(
        self,
        account_id: str,
        before_date: date,
    ) -> list[PriorPostingRow]:
        """Return posted postings of the account dated before ``before_date``."""

    def fetch_headers_in_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[PostingHeaderRow]:
        """Return headers dated within the inclusive window, by date."""

    def fetch_posting_lines(
        self,
        account_id: str,
        header_ids: Sequence[str],
    ) -> list[PostingLineRow]:
        """Return posting lines of the account owned by ``header_ids``."""


__all__ = [
    "LedgerRepositoryPort",
    "CurrencyRow",
    "PostingHeaderRow",
    "PostingLineRow",
    "PriorPostingRow",
]
