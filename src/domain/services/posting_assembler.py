"""Posting assembly with running balances."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.errors import ReferentialGapError
from src.domain.models import (
    MergedTransaction,
    OpeningBalance,
    PostingHeaderRow,
    PostingLineRow,
)
from src.domain.services.currency import CurrencyResolver
from src.domain.services.validation import validate_posting_sides
from src.utils.decimal_utils import coerce_decimal

_DEFAULT_RATE = Decimal("1")


def _exchange_rate(value) -> Decimal:
    rate = coerce_decimal(value, default=_DEFAULT_RATE)
    return rate if rate > 0 else _DEFAULT_RATE


def assemble_postings(
    headers: Iterable[PostingHeaderRow],
    lines: Iterable[PostingLineRow],
    opening_balance: OpeningBalance,
    currency_resolver: CurrencyResolver,
    logger: Logger,
) -> list[MergedTransaction]:
    """Join lines to headers and attach running balances.

    Lines are processed by header date, then header fetch order, then line
    fetch order. The base running balance starts at the opening balance and
    the document currency running balance starts at zero; each row carries
    the totals after its own amounts.

    Args:
        headers: Headers of the report window, in fetch order.
        lines: Posting lines of the selected account, in fetch order.
        opening_balance: Balance seeding the base running balance.
        currency_resolver: Lookup for document currency codes.
        logger: Logger used for diagnostics.

    Returns:
        list[MergedTransaction]: Rows sorted by date ascending.
    """
    ordered_headers = sorted(
        enumerate(headers),
        key=lambda item: (item[1].transaction_date, item[0]),
    )
    header_rank = {
        header.id: (rank, header)
        for rank, (_, header) in enumerate(ordered_headers)
    }

    matched: list[tuple[int, int, PostingHeaderRow, PostingLineRow]] = []
    for index, line in enumerate(lines):
        entry = header_rank.get(line.header_id)
        if entry is None:
            gap = ReferentialGapError(str(line.id), str(line.header_id))
            logger.warning(f"Dropping posting line: {gap}")
            continue
        rank, header = entry
        matched.append((rank, index, header, line))
    matched.sort(key=lambda item: (item[0], item[1]))

    running_balance = opening_balance.balance
    running_balance_doc = Decimal("0")
    rows: list[MergedTransaction] = []
    for _, _, header, line in matched:
        debit = coerce_decimal(line.debit)
        credit = coerce_decimal(line.credit)
        debit_doc = coerce_decimal(line.debit_doc)
        credit_doc = coerce_decimal(line.credit_doc)
        validate_posting_sides(
            str(line.id),
            debit,
            credit,
            debit_doc,
            credit_doc,
            logger,
        )
        running_balance += debit - credit
        running_balance_doc += debit_doc - credit_doc
        rows.append(
            MergedTransaction(
                line_id=str(line.id),
                transaction_date=header.transaction_date,
                transaction_type=header.type_description or "",
                narration=line.narration or header.narration or "",
                document_currency_amount=(
                    debit_doc if debit_doc > 0 else -credit_doc
                ),
                currency_code=currency_resolver.resolve(line.currency_id),
                exchange_rate=_exchange_rate(line.exchange_rate),
                debit=debit,
                credit=credit,
                debit_doc=debit_doc,
                credit_doc=credit_doc,
                running_balance=running_balance,
                running_balance_doc=running_balance_doc,
            )
        )
    return sorted(rows, key=lambda row: row.transaction_date)


__all__ = ["assemble_postings"]
