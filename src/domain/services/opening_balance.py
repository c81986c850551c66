"""Opening balance accumulation."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import POSTED_STATUS
from src.domain.models import OpeningBalance, PriorPostingRow
from src.utils.decimal_utils import coerce_decimal


def compute_opening_balance(
    rows: Iterable[PriorPostingRow],
    cutoff: date,
    posted_status: str = POSTED_STATUS,
) -> OpeningBalance:
    """Sum posted activity strictly before ``cutoff``.

    Rows dated on or after the cutoff, or whose header is not posted, are
    ignored even if the store returned them.

    Args:
        rows: Prior posting rows for a single account.
        cutoff: First day of the report window.
        posted_status: Header status counted as posted.

    Returns:
        OpeningBalance: Debit and credit totals and their difference.
    """
    debit_total = Decimal("0")
    credit_total = Decimal("0")
    for row in rows:
        if row.status != posted_status:
            continue
        if row.transaction_date >= cutoff:
            continue
        debit_total += coerce_decimal(row.debit)
        credit_total += coerce_decimal(row.credit)
    return OpeningBalance(
        debit_total=debit_total,
        credit_total=credit_total,
        balance=debit_total - credit_total,
    )


__all__ = ["compute_opening_balance"]
