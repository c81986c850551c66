"""Tests for the GeneralLedgerSession."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.general_ledger_session import (
    QUERY_FAILURE_MESSAGE,
    GeneralLedgerSession,
)
from src.domain.errors import InvalidRangeError, QueryFailureError
from src.domain.models import (
    DateRangeSelection,
    DateWindow,
    GeneralLedgerReport,
    MergedTransaction,
    OpeningBalance,
    SortSpec,
)


def _posting(line_id: str, day: date, narration: str, balance: str):
    return MergedTransaction(
        line_id=line_id,
        transaction_date=day,
        transaction_type="Journal Voucher",
        narration=narration,
        document_currency_amount=Decimal("0"),
        currency_code="USD",
        exchange_rate=Decimal("1"),
        debit=Decimal("0"),
        credit=Decimal("0"),
        debit_doc=Decimal("0"),
        credit_doc=Decimal("0"),
        running_balance=Decimal(balance),
        running_balance_doc=Decimal("0"),
    )


def _report(account_id: str, *postings: MergedTransaction) -> GeneralLedgerReport:
    return GeneralLedgerReport(
        account_id=account_id,
        window=DateWindow(date(2024, 1, 1), date(2024, 1, 31)),
        opening_balance=OpeningBalance.zero(),
        postings=tuple(postings),
    )


def _session(use_case: MagicMock | None = None) -> GeneralLedgerSession:
    return GeneralLedgerSession(use_case or MagicMock(), logger=MagicMock())


def test_load_commits_report_and_clears_error() -> None:
    report = _report("acc-1")
    use_case = MagicMock()
    use_case.execute.return_value = report
    session = _session(use_case)
    session.error = "previous"

    committed = session.load("acc-1", DateRangeSelection(), today=date(2024, 1, 31))

    assert committed is True
    assert session.report is report
    assert session.error is None
    assert session.is_loading is False
    use_case.execute.assert_called_once_with(
        "acc-1",
        DateRangeSelection(),
        today=date(2024, 1, 31),
    )


def test_stale_report_is_discarded() -> None:
    """A slow response for an older selection never overwrites a newer one."""
    session = _session()
    first = session.begin_selection("acc-1", DateRangeSelection())
    second = session.begin_selection("acc-2", DateRangeSelection())
    newer = _report("acc-2")

    assert session.apply_report(second.token, newer) is True
    assert session.apply_report(first.token, _report("acc-1")) is False
    assert session.report is newer


def test_stale_failure_is_discarded() -> None:
    session = _session()
    first = session.begin_selection("acc-1", DateRangeSelection())
    second = session.begin_selection("acc-1", DateRangeSelection("last_month"))
    session.apply_report(second.token, _report("acc-1"))

    assert session.apply_failure(first.token, QueryFailureError("late")) is False
    assert session.report is not None
    assert session.error is None


def test_tokens_increase_with_each_selection() -> None:
    session = _session()

    first = session.begin_selection("acc-1", DateRangeSelection())
    second = session.begin_selection("acc-1", DateRangeSelection())

    assert second.token > first.token
    assert session.generation == second.token
    assert session.is_current(second.token)
    assert not session.is_current(first.token)
    assert session.is_loading is True


def test_query_failure_clears_report_with_generic_message() -> None:
    use_case = MagicMock()
    use_case.execute.side_effect = [
        _report("acc-1"),
        QueryFailureError("connection lost"),
    ]
    session = _session(use_case)

    session.load("acc-1", DateRangeSelection())
    session.load("acc-1", DateRangeSelection("last_month"))

    assert session.report is None
    assert session.error == QUERY_FAILURE_MESSAGE
    assert session.range_error is False
    assert session.visible_rows() == []


def test_invalid_range_sets_range_error_flag() -> None:
    use_case = MagicMock()
    use_case.execute.side_effect = InvalidRangeError(
        "Start date must not be after end date"
    )
    session = _session(use_case)

    session.load("acc-1", DateRangeSelection("custom", "2024-02-01", "2024-01-01"))

    assert session.range_error is True
    assert session.error == "Start date must not be after end date"
    assert session.report is None


def test_clear_invalidates_pending_request() -> None:
    session = _session()
    request = session.begin_selection("acc-1", DateRangeSelection())

    session.clear()

    assert session.apply_report(request.token, _report("acc-1")) is False
    assert session.report is None
    assert session.is_loading is False


def test_visible_rows_apply_view_state() -> None:
    report = _report(
        "acc-1",
        _posting("a", date(2024, 1, 2), "Office rent", "10"),
        _posting("b", date(2024, 1, 3), "Supplies", "20"),
        _posting("c", date(2024, 1, 4), "Rent deposit", "30"),
    )
    session = _session()
    token = session.begin_selection("acc-1", DateRangeSelection()).token
    session.apply_report(token, report)

    session.update_view(search_text="rent", search_column="narration")

    assert [row.line_id for row in session.visible_rows()] == ["c", "a"]

    session.toggle_sort("date")

    assert session.view_state.sort == SortSpec("date", "asc")
    assert [row.line_id for row in session.visible_rows()] == ["a", "c"]

    session.set_filter("narration", "deposit")

    assert [row.line_id for row in session.visible_rows()] == ["c"]
    assert [row.running_balance for row in session.visible_rows()] == [
        Decimal("30")
    ]
