"""Tests for the LoadCurrencyResolverUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.load_currencies import (
    LoadCurrencyResolverUseCase,
)
from src.domain.errors import QueryFailureError
from src.domain.models import CurrencyRow


def test_execute_builds_resolver_from_snapshot() -> None:
    repository = MagicMock()
    repository.fetch_currencies.return_value = [
        CurrencyRow(id="1", code="usd", is_base=True),
        CurrencyRow(id="2", code=" EUR "),
    ]

    resolver = LoadCurrencyResolverUseCase(
        repository,
        logger=MagicMock(),
    ).execute()

    assert resolver.resolve("1") == "USD"
    assert resolver.resolve("2") == "EUR"
    assert resolver.resolve("3") == ""
    assert resolver.base_currency_code() == "USD"


def test_execute_returns_empty_resolver_on_query_failure() -> None:
    """Missing currencies degrade to blank codes instead of failing."""
    repository = MagicMock()
    repository.fetch_currencies.side_effect = QueryFailureError("boom")
    logger = MagicMock()

    resolver = LoadCurrencyResolverUseCase(repository, logger=logger).execute()

    assert len(resolver) == 0
    assert resolver.resolve("1") == ""
    logger.warning.assert_called_once()
