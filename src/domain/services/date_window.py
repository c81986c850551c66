"""Report window resolution."""

import calendar
from datetime import date, timedelta

from src.domain.constants import (
    RANGE_CUSTOM,
    RANGE_LAST_MONTH,
    RANGE_LAST_WEEK,
    TRAILING_WEEK_DAYS,
)
from src.domain.errors import InvalidRangeError
from src.domain.models import DateRangeSelection, DateWindow


def subtract_months(value: date, months: int) -> date:
    """Move ``value`` back by whole calendar months.

    The day is clamped to the length of the target month, so 31 March minus
    one month is 28 or 29 February.
    """
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(value.day, last_day))


def _parse_boundary(raw: str | None, label: str) -> date | None:
    if raw is None or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise InvalidRangeError(
            f"Invalid {label} date '{raw}'. Expected format YYYY-MM-DD."
        ) from exc


def resolve_date_window(
    selection: DateRangeSelection,
    today: date,
) -> DateWindow:
    """Turn a user range selection into an inclusive day window.

    Relative ranges trail ``today``. Custom ranges fall back to the trailing
    week start and to ``today`` for empty boundaries.

    Args:
        selection: Range kind and optional raw custom boundaries.
        today: Current calendar day.

    Returns:
        DateWindow: Validated window with ``start <= end``.

    Raises:
        InvalidRangeError: If a boundary does not parse, the bounds are
            inverted, or the range kind is unknown.
    """
    default_start = today - timedelta(days=TRAILING_WEEK_DAYS)
    if selection.kind == RANGE_LAST_WEEK:
        start, end = default_start, today
    elif selection.kind == RANGE_LAST_MONTH:
        start, end = subtract_months(today, 1), today
    elif selection.kind == RANGE_CUSTOM:
        start = _parse_boundary(selection.custom_start, "start")
        end = _parse_boundary(selection.custom_end, "end")
        start = start or default_start
        end = end or today
    else:
        raise InvalidRangeError(f"Unknown date range: {selection.kind}")
    if start > end:
        raise InvalidRangeError(
            f"Start date {start.isoformat()} is after end date "
            f"{end.isoformat()}"
        )
    return DateWindow(start=start, end=end)


__all__ = ["resolve_date_window", "subtract_months"]
