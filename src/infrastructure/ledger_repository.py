"""SQLAlchemy-backed repository for general ledger data."""

from collections.abc import Sequence
from datetime import date, datetime

from sqlalchemy import bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    CurrencyRow,
    LedgerRepositoryPort,
    PostingHeaderRow,
    PostingLineRow,
    PriorPostingRow,
)
from src.domain.constants import POSTED_STATUS
from src.domain.errors import QueryFailureError
from src.domain.models import AccountDTO
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for general ledger queries."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        posted_status: str = POSTED_STATUS,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            posted_status: Header status counted in opening balances.
        """
        self._db_port = db_port
        self._posted_status = posted_status

    def fetch_active_accounts(self) -> list[AccountDTO]:
        query = text(
            """
            SELECT id, code, name
            FROM chart_of_accounts
            WHERE is_active = :active
            ORDER BY code
            """
        )
        rows = self._fetch_all("active accounts", query, {"active": True})
        return [
            AccountDTO(id=str(row.id), code=row.code, name=row.name)
            for row in rows
        ]

    def fetch_currencies(self) -> list[CurrencyRow]:
        query = text(
            """
            SELECT id, code, rate, exchange_rate_note, is_base
            FROM currencies
            ORDER BY code
            """
        )
        rows = self._fetch_all("currencies", query, {})
        return [
            CurrencyRow(
                id=str(row.id),
                code=row.code,
                rate=(
                    coerce_decimal(row.rate) if row.rate is not None else None
                ),
                rate_direction=row.exchange_rate_note,
                is_base=bool(row.is_base),
            )
            for row in rows
        ]

    def fetch_prior_postings(
        self,
        account_id: str,
        before_date: date,
    ) -> list[PriorPostingRow]:
        query = text(
            """
            SELECT t.debit AS debit,
                   t.credit AS credit,
                   h.transaction_date AS transaction_date,
                   h.status AS status
            FROM gl_transactions t
            JOIN gl_headers h ON h.id = t.header_id
            WHERE t.account_id = :account_id
              AND h.status = :posted_status
              AND h.transaction_date < :before_date
            """
        )
        params = {
            "account_id": account_id,
            "posted_status": self._posted_status,
            "before_date": before_date,
        }
        rows = self._fetch_all("prior postings", query, params)
        return [
            PriorPostingRow(
                debit=row.debit,
                credit=row.credit,
                transaction_date=self._coerce_date(row.transaction_date),
                status=row.status,
            )
            for row in rows
        ]

    def fetch_headers_in_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[PostingHeaderRow]:
        query = text(
            """
            SELECT h.id AS id,
                   h.transaction_date AS transaction_date,
                   tt.transaction_type_code AS type_code,
                   tt.description AS type_description,
                   h.description AS narration
            FROM gl_headers h
            JOIN tbl_trans_type tt ON tt.id = h.type_id
            WHERE h.transaction_date >= :start_date
              AND h.transaction_date <= :end_date
            ORDER BY h.transaction_date
            """
        )
        params = {"start_date": start_date, "end_date": end_date}
        rows = self._fetch_all("headers", query, params)
        return [
            PostingHeaderRow(
                id=str(row.id),
                transaction_date=self._coerce_date(row.transaction_date),
                type_code=row.type_code or "",
                type_description=row.type_description or "",
                narration=row.narration,
            )
            for row in rows
        ]

    def fetch_posting_lines(
        self,
        account_id: str,
        header_ids: Sequence[str],
    ) -> list[PostingLineRow]:
        if not header_ids:
            return []
        query = text(
            """
            SELECT id,
                   header_id,
                   debit,
                   credit,
                   debit_doc_currency,
                   credit_doc_currency,
                   exchange_rate,
                   currency_id,
                   description
            FROM gl_transactions
            WHERE account_id = :account_id
              AND header_id IN :header_ids
            ORDER BY id
            """
        ).bindparams(bindparam("header_ids", expanding=True))
        params = {"account_id": account_id, "header_ids": list(header_ids)}
        rows = self._fetch_all("posting lines", query, params)
        return [
            PostingLineRow(
                id=str(row.id),
                header_id=str(row.header_id),
                debit=row.debit,
                credit=row.credit,
                debit_doc=row.debit_doc_currency,
                credit_doc=row.credit_doc_currency,
                exchange_rate=row.exchange_rate,
                currency_id=(
                    str(row.currency_id)
                    if row.currency_id is not None
                    else None
                ),
                narration=row.description,
            )
            for row in rows
        ]

    def _fetch_all(self, label: str, query, params: dict) -> list:
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise QueryFailureError(
                f"Failed to fetch {label}: {exc}"
            ) from exc

    @staticmethod
    def _coerce_date(value) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError as exc:
            raise QueryFailureError(
                f"Invalid stored transaction date: {value!r}"
            ) from exc


__all__ = ["SqlAlchemyLedgerRepository"]
