"""Tests for the GetGeneralLedgerUseCase."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_general_ledger import (
    OPENING_BALANCE_NOTICE,
    GetGeneralLedgerUseCase,
)
from src.domain.errors import InvalidRangeError, QueryFailureError
from src.domain.models import (
    AccountDTO,
    CurrencyRow,
    DateRangeSelection,
    DateWindow,
    PostingHeaderRow,
    PostingLineRow,
    PriorPostingRow,
)
from src.domain.services.currency import CurrencyResolver

TODAY = date(2024, 1, 15)


class RecordingLedgerRepository(LedgerRepositoryPort):
    """In-memory repository recording the order of queries."""

    def __init__(
        self,
        prior: list[PriorPostingRow] | None = None,
        headers: list[PostingHeaderRow] | None = None,
        lines: list[PostingLineRow] | None = None,
        prior_error: Exception | None = None,
        headers_error: Exception | None = None,
    ) -> None:
        self.calls: list[str] = []
        self._prior = prior or []
        self._headers = headers or []
        self._lines = lines or []
        self._prior_error = prior_error
        self._headers_error = headers_error
        self.requested_header_ids: list[str] = []

    def fetch_active_accounts(self) -> list[AccountDTO]:
        self.calls.append("accounts")
        return []

    def fetch_currencies(self) -> list[CurrencyRow]:
        self.calls.append("currencies")
        return []

    def fetch_prior_postings(
        self,
        account_id: str,
        before_date: date,
    ) -> list[PriorPostingRow]:
        self.calls.append("prior")
        if self._prior_error is not None:
            raise self._prior_error
        return [row for row in self._prior if row.transaction_date < before_date]

    def fetch_headers_in_range(
        self,
        start_date: date,
        end_date: date,
    ) -> list[PostingHeaderRow]:
        self.calls.append("headers")
        if self._headers_error is not None:
            raise self._headers_error
        return [
            header
            for header in self._headers
            if start_date <= header.transaction_date <= end_date
        ]

    def fetch_posting_lines(
        self,
        account_id: str,
        header_ids: Sequence[str],
    ) -> list[PostingLineRow]:
        self.calls.append("lines")
        self.requested_header_ids = list(header_ids)
        return [line for line in self._lines if line.header_id in header_ids]


def _prior(amount: str, day: date) -> PriorPostingRow:
    value = Decimal(amount)
    return PriorPostingRow(
        debit=max(value, Decimal("0")),
        credit=max(-value, Decimal("0")),
        transaction_date=day,
        status="posted",
    )


def _header(header_id: str, day: date) -> PostingHeaderRow:
    return PostingHeaderRow(
        id=header_id,
        transaction_date=day,
        type_code="CE",
        type_description="Cash Entry",
        narration=f"Header {header_id}",
    )


def _line(line_id: str, header_id: str, debit="0", credit="0") -> PostingLineRow:
    return PostingLineRow(
        id=line_id,
        header_id=header_id,
        debit=debit,
        credit=credit,
        debit_doc=debit,
        credit_doc=credit,
        exchange_rate="1",
        currency_id="1",
    )


def _use_case(repository: LedgerRepositoryPort) -> GetGeneralLedgerUseCase:
    resolver = CurrencyResolver.from_rows(
        [CurrencyRow(id="1", code="USD", is_base=True)]
    )
    return GetGeneralLedgerUseCase(
        repository,
        currency_resolver=resolver,
        logger=MagicMock(),
    )


def test_execute_builds_report_with_running_balances() -> None:
    repository = RecordingLedgerRepository(
        prior=[_prior("500", date(2023, 12, 1))],
        headers=[
            _header("h1", date(2024, 1, 10)),
            _header("h2", date(2024, 1, 12)),
        ],
        lines=[
            _line("l1", "h1", debit="100"),
            _line("l2", "h2", credit="40"),
        ],
    )

    report = _use_case(repository).execute(
        "acc-1",
        DateRangeSelection(),
        today=TODAY,
    )

    assert report.window == DateWindow(date(2024, 1, 8), TODAY)
    assert report.opening_balance.balance == Decimal("500")
    assert [row.running_balance for row in report.postings] == [
        Decimal("600"),
        Decimal("560"),
    ]
    assert report.closing_balance == Decimal("560")
    assert report.postings[0].currency_code == "USD"
    assert report.base_currency_code == "USD"
    assert report.notices == ()


def test_opening_balance_is_fetched_before_headers_and_lines() -> None:
    repository = RecordingLedgerRepository(
        headers=[_header("h1", date(2024, 1, 10))],
        lines=[_line("l1", "h1", debit="1")],
    )

    _use_case(repository).execute("acc-1", DateRangeSelection(), today=TODAY)

    assert repository.calls == ["prior", "headers", "lines"]
    assert repository.requested_header_ids == ["h1"]


def test_no_headers_skips_line_query_and_keeps_opening_balance() -> None:
    """Opening 200 with no activity gives an empty ledger at 200."""
    repository = RecordingLedgerRepository(
        prior=[_prior("200", date(2023, 6, 1))],
    )

    report = _use_case(repository).execute(
        "acc-1",
        DateRangeSelection(),
        today=TODAY,
    )

    assert repository.calls == ["prior", "headers"]
    assert report.postings == ()
    assert report.base_currency_code == "USD"
    assert report.opening_balance.balance == Decimal("200")
    assert report.closing_balance == Decimal("200")


def test_opening_balance_failure_adds_notice_and_continues() -> None:
    repository = RecordingLedgerRepository(
        prior_error=QueryFailureError("prior query failed"),
        headers=[_header("h1", date(2024, 1, 10))],
        lines=[_line("l1", "h1", debit="100")],
    )

    report = _use_case(repository).execute(
        "acc-1",
        DateRangeSelection(),
        today=TODAY,
    )

    assert report.notices == (OPENING_BALANCE_NOTICE,)
    assert report.opening_balance.balance == Decimal("0")
    assert report.postings[0].running_balance == Decimal("100")


def test_header_failure_propagates() -> None:
    repository = RecordingLedgerRepository(
        headers_error=QueryFailureError("headers failed"),
    )

    with pytest.raises(QueryFailureError):
        _use_case(repository).execute(
            "acc-1",
            DateRangeSelection(),
            today=TODAY,
        )


def test_invalid_custom_range_raises_before_any_query() -> None:
    repository = RecordingLedgerRepository()
    selection = DateRangeSelection(
        kind="custom",
        custom_start="2024-02-01",
        custom_end="2024-01-01",
    )

    with pytest.raises(InvalidRangeError):
        _use_case(repository).execute("acc-1", selection, today=TODAY)

    assert repository.calls == []


def test_custom_range_window_is_inclusive() -> None:
    repository = RecordingLedgerRepository(
        headers=[
            _header("before", date(2023, 12, 31)),
            _header("first", date(2024, 1, 1)),
            _header("last", date(2024, 1, 5)),
            _header("after", date(2024, 1, 6)),
        ],
        lines=[
            _line("l-before", "before", debit="1"),
            _line("l-first", "first", debit="2"),
            _line("l-last", "last", debit="3"),
            _line("l-after", "after", debit="4"),
        ],
    )
    selection = DateRangeSelection(
        kind="custom",
        custom_start="2024-01-01",
        custom_end="2024-01-05",
    )

    report = _use_case(repository).execute("acc-1", selection, today=TODAY)

    assert [row.line_id for row in report.postings] == ["l-first", "l-last"]
