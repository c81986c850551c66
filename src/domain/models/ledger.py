"""Domain models for the general ledger report."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.constants import DATE_LABEL_FORMAT, RANGE_LAST_WEEK


@dataclass(frozen=True)
class OpeningBalance:
    """Net position of an account before the report window.

    Attributes:
        debit_total: Sum of posted debits before the cutoff.
        credit_total: Sum of posted credits before the cutoff.
        balance: Debit total minus credit total.
    """

    debit_total: Decimal
    credit_total: Decimal
    balance: Decimal

    @classmethod
    def zero(cls) -> "OpeningBalance":
        """Return an empty opening balance."""
        return cls(
            debit_total=Decimal("0"),
            credit_total=Decimal("0"),
            balance=Decimal("0"),
        )


@dataclass(frozen=True)
class DateRangeSelection:
    """Date range as chosen by the user, before validation.

    Attributes:
        kind: ``last_week``, ``last_month`` or ``custom``.
        custom_start: Raw ISO start date for custom ranges.
        custom_end: Raw ISO end date for custom ranges.
    """

    kind: str = RANGE_LAST_WEEK
    custom_start: str | None = None
    custom_end: str | None = None


@dataclass(frozen=True)
class DateWindow:
    """Inclusive calendar-day window of a report."""

    start: date
    end: date


@dataclass(frozen=True)
class MergedTransaction:
    """One posting line joined with its header and running balances."""

    line_id: str
    transaction_date: date
    transaction_type: str
    narration: str
    document_currency_amount: Decimal
    currency_code: str
    exchange_rate: Decimal
    debit: Decimal
    credit: Decimal
    debit_doc: Decimal
    credit_doc: Decimal
    running_balance: Decimal
    running_balance_doc: Decimal

    @property
    def date_label(self) -> str:
        """Return the transaction date formatted for display."""
        return self.transaction_date.strftime(DATE_LABEL_FORMAT)


@dataclass(frozen=True)
class GeneralLedgerReport:
    """Assembled ledger for one account over one window."""

    account_id: str
    window: DateWindow
    opening_balance: OpeningBalance
    postings: tuple[MergedTransaction, ...]
    notices: tuple[str, ...] = ()
    base_currency_code: str = ""

    @property
    def closing_balance(self) -> Decimal:
        """Return the running balance after the last posting."""
        if not self.postings:
            return self.opening_balance.balance
        return self.postings[-1].running_balance


@dataclass(frozen=True)
class LedgerTable:
    """Display-ready table handed to renderers and exporters."""

    columns: tuple[str, ...]
    records: list[dict[str, str]] = field(default_factory=list)
    display_mode: str = "local"


__all__ = [
    "OpeningBalance",
    "DateRangeSelection",
    "DateWindow",
    "MergedTransaction",
    "GeneralLedgerReport",
    "LedgerTable",
]
