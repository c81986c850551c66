"""Domain models for raw rows read from the ledger store."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CurrencyRow:
    """Row representing a currency reference.

    Attributes:
        id: Store identifier of the currency.
        code: Short ISO-like code.
        rate: Optional reference rate against the base currency.
        rate_direction: Optional ``multiply`` or ``divide`` note for ``rate``.
        is_base: Whether this is the ledger base currency.
    """

    id: str
    code: str
    rate: Decimal | None = None
    rate_direction: str | None = None
    is_base: bool = False


@dataclass(frozen=True)
class PostingHeaderRow:
    """Row representing a transaction header in the report window."""

    id: str
    transaction_date: date
    type_code: str
    type_description: str
    narration: str | None


@dataclass(frozen=True)
class PostingLineRow:
    """Row representing one posting line against the selected account.

    Amounts are kept as read from the store; the assembler coerces missing
    or non-numeric values.
    """

    id: str
    header_id: str
    debit: Decimal | None
    credit: Decimal | None
    debit_doc: Decimal | None
    credit_doc: Decimal | None
    exchange_rate: Decimal | None
    currency_id: str | None
    narration: str | None = None


@dataclass(frozen=True)
class PriorPostingRow:
    """Row representing a posting dated before the report window."""

    debit: Decimal | None
    credit: Decimal | None
    transaction_date: date
    status: str


__all__ = [
    "CurrencyRow",
    "PostingHeaderRow",
    "PostingLineRow",
    "PriorPostingRow",
]
