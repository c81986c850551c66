"""Tests for the opening balance accumulator."""

from datetime import date
from decimal import Decimal

from src.domain.models import PriorPostingRow
from src.domain.services.opening_balance import compute_opening_balance


def _prior(debit, credit, day: date, status: str = "posted") -> PriorPostingRow:
    return PriorPostingRow(
        debit=debit,
        credit=credit,
        transaction_date=day,
        status=status,
    )


def test_sums_posted_rows_before_cutoff() -> None:
    rows = [
        _prior(Decimal("100"), Decimal("0"), date(2024, 1, 1)),
        _prior(Decimal("0"), Decimal("30"), date(2024, 1, 5)),
        _prior(Decimal("12.50"), None, date(2024, 1, 9)),
    ]

    result = compute_opening_balance(rows, date(2024, 1, 10))

    assert result.debit_total == Decimal("112.50")
    assert result.credit_total == Decimal("30")
    assert result.balance == Decimal("82.50")


def test_rows_on_or_after_cutoff_do_not_contribute() -> None:
    rows = [
        _prior(Decimal("100"), Decimal("0"), date(2024, 1, 9)),
        _prior(Decimal("50"), Decimal("0"), date(2024, 1, 10)),
        _prior(Decimal("0"), Decimal("70"), date(2024, 2, 1)),
    ]

    result = compute_opening_balance(rows, date(2024, 1, 10))

    assert result.balance == Decimal("100")


def test_unposted_rows_never_contribute() -> None:
    rows = [
        _prior(Decimal("100"), Decimal("0"), date(2024, 1, 1)),
        _prior(Decimal("500"), Decimal("0"), date(2024, 1, 1), "draft"),
        _prior(Decimal("0"), Decimal("80"), date(2024, 1, 2), "unposted"),
    ]

    result = compute_opening_balance(rows, date(2024, 1, 10))

    assert result.balance == Decimal("100")
    assert result.credit_total == Decimal("0")


def test_non_numeric_amounts_count_as_zero() -> None:
    rows = [
        _prior("abc", "10", date(2024, 1, 1)),
        _prior(None, "", date(2024, 1, 2)),
    ]

    result = compute_opening_balance(rows, date(2024, 1, 10))

    assert result.debit_total == Decimal("0")
    assert result.balance == Decimal("-10")


def test_result_does_not_depend_on_row_order() -> None:
    rows = [
        _prior(Decimal("0.1"), Decimal("0"), date(2024, 1, 1)),
        _prior(Decimal("0.2"), Decimal("0"), date(2024, 1, 2)),
        _prior(Decimal("0"), Decimal("0.3"), date(2024, 1, 3)),
    ]

    forward = compute_opening_balance(rows, date(2024, 2, 1))
    backward = compute_opening_balance(list(reversed(rows)), date(2024, 2, 1))

    assert forward == backward
    assert forward.balance == Decimal("0.0")


def test_custom_posted_status() -> None:
    rows = [_prior(Decimal("5"), Decimal("0"), date(2024, 1, 1), "POSTED")]

    assert compute_opening_balance(
        rows, date(2024, 2, 1)
    ).balance == Decimal("0")
    assert compute_opening_balance(
        rows, date(2024, 2, 1), posted_status="POSTED"
    ).balance == Decimal("5")
