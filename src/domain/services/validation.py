"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger


def validate_posting_sides(
    line_id: str,
    debit: Decimal,
    credit: Decimal,
    debit_doc: Decimal,
    credit_doc: Decimal,
    logger: Logger,
) -> None:
    """Warn when a posting line is both a debit and a credit.

    The line is reported as-is; amounts are never netted here.

    Args:
        line_id: Identifier of the posting line.
        debit: Base currency debit.
        credit: Base currency credit.
        debit_doc: Document currency debit.
        credit_doc: Document currency credit.
        logger: Logger used for warnings.
    """
    if debit != 0 and credit != 0:
        logger.warning(
            f"Posting line {line_id} has both debit={debit} and credit={credit}"
        )
    if debit_doc != 0 and credit_doc != 0:
        logger.warning(
            f"Posting line {line_id} has both debit_doc={debit_doc} "
            f"and credit_doc={credit_doc}"
        )
    if min(debit, credit, debit_doc, credit_doc) < 0:
        logger.warning(f"Posting line {line_id} has a negative amount")


__all__ = ["validate_posting_sides"]
