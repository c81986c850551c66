"""Use case to build the session currency lookup."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import QueryFailureError
from src.domain.services.currency import CurrencyResolver
from src.infrastructure.logging.logger import get_app_logger


class LoadCurrencyResolverUseCase:
    """Build a ``CurrencyResolver`` from a snapshot of currencies."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self) -> CurrencyResolver:
        """Return the resolver, empty when currencies cannot be read.

        Returns:
            CurrencyResolver: Lookup reused for the whole session.
        """
        try:
            rows = self._ledger_repository.fetch_currencies()
        except QueryFailureError as exc:
            self._logger.warning(f"Failed to load currencies: {exc}")
            return CurrencyResolver.empty()
        resolver = CurrencyResolver.from_rows(rows)
        self._logger.info(f"Loaded {len(resolver)} currencies")
        return resolver


__all__ = ["LoadCurrencyResolverUseCase"]
