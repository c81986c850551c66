"""Tests for the currency resolver."""

from decimal import Decimal

from src.domain.models import CurrencyRow
from src.domain.services.currency import CurrencyResolver


def test_resolve_returns_code_for_known_currency() -> None:
    resolver = CurrencyResolver.from_rows(
        [
            CurrencyRow(id="1", code="usd ", is_base=True),
            CurrencyRow(
                id="2",
                code="EUR",
                rate=Decimal("1.08"),
                rate_direction="multiply",
            ),
        ]
    )

    assert resolver.resolve("1") == "USD"
    assert resolver.resolve("2") == "EUR"
    assert resolver.base_currency_code() == "USD"
    assert len(resolver) == 2


def test_resolve_unknown_or_missing_currency_returns_empty_string() -> None:
    resolver = CurrencyResolver.from_rows([CurrencyRow(id="1", code="USD")])

    assert resolver.resolve("404") == ""
    assert resolver.resolve(None) == ""
    assert resolver.base_currency_code() == ""


def test_empty_resolver_never_raises() -> None:
    resolver = CurrencyResolver.empty()

    assert resolver.resolve("1") == ""
    assert len(resolver) == 0
