"""Tests for report window resolution."""

from datetime import date

import pytest

from src.domain.errors import InvalidRangeError
from src.domain.models import DateRangeSelection
from src.domain.services.date_window import (
    resolve_date_window,
    subtract_months,
)

TODAY = date(2024, 3, 31)


def test_last_week_trails_today() -> None:
    window = resolve_date_window(DateRangeSelection("last_week"), TODAY)

    assert window.start == date(2024, 3, 24)
    assert window.end == TODAY


def test_last_month_clamps_day_to_month_length() -> None:
    window = resolve_date_window(DateRangeSelection("last_month"), TODAY)

    assert window.start == date(2024, 2, 29)
    assert window.end == TODAY


def test_subtract_months_crosses_year_boundary() -> None:
    assert subtract_months(date(2024, 1, 15), 1) == date(2023, 12, 15)
    assert subtract_months(date(2023, 3, 31), 1) == date(2023, 2, 28)


def test_custom_range_uses_given_boundaries() -> None:
    selection = DateRangeSelection(
        kind="custom",
        custom_start="2024-01-01",
        custom_end="2024-01-31",
    )

    window = resolve_date_window(selection, TODAY)

    assert window.start == date(2024, 1, 1)
    assert window.end == date(2024, 1, 31)


def test_custom_range_defaults_missing_boundaries() -> None:
    selection = DateRangeSelection(kind="custom", custom_start=None,
                                   custom_end="  ")

    window = resolve_date_window(selection, TODAY)

    assert window.start == date(2024, 3, 24)
    assert window.end == TODAY


def test_custom_range_single_day_is_valid() -> None:
    selection = DateRangeSelection(
        kind="custom",
        custom_start="2024-02-10",
        custom_end="2024-02-10",
    )

    window = resolve_date_window(selection, TODAY)

    assert window.start == window.end == date(2024, 2, 10)


def test_inverted_custom_range_is_rejected() -> None:
    selection = DateRangeSelection(
        kind="custom",
        custom_start="2024-02-10",
        custom_end="2024-02-01",
    )

    with pytest.raises(InvalidRangeError):
        resolve_date_window(selection, TODAY)


def test_custom_start_after_today_without_end_is_rejected() -> None:
    selection = DateRangeSelection(kind="custom", custom_start="2024-05-01")

    with pytest.raises(InvalidRangeError):
        resolve_date_window(selection, TODAY)


def test_unparsable_boundary_is_rejected() -> None:
    selection = DateRangeSelection(kind="custom", custom_start="31/02/2024")

    with pytest.raises(InvalidRangeError, match="start"):
        resolve_date_window(selection, TODAY)


def test_unknown_range_kind_is_rejected() -> None:
    with pytest.raises(InvalidRangeError):
        resolve_date_window(DateRangeSelection("last_decade"), TODAY)
