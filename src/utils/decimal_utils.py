"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value, default: Decimal = Decimal("0")) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing or non-numeric values fall back to ``default`` so a malformed
    amount never aborts a report.

    Args:
        value: Raw numeric value from SQL or adapters.
        default: Value returned when ``value`` cannot be read as a number.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default
    return result if result.is_finite() else default


def decimal_text(value: Decimal) -> str:
    """Render a Decimal as plain text without trailing zeros.

    Args:
        value: Amount to render.

    Returns:
        str: ``Decimal("100.00")`` becomes ``"100"``, ``Decimal("40.50")``
        becomes ``"40.5"``.
    """
    if value == 0:
        return "0"
    return format(value.normalize(), "f")


__all__ = ["coerce_decimal", "decimal_text"]
