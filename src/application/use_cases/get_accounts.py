"""Use case to read active ledger accounts for account pickers."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import AccountDTO
from src.domain.policies.account_filters import (
    filter_accounts,
    is_selectable_account,
)
from src.infrastructure.logging.logger import get_app_logger


class GetAccountsUseCase:
    """Fetch active accounts from the ledger store."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case with its required dependencies."""
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, search_term: str = "") -> list[AccountDTO]:
        """Return active accounts ordered by code.

        Args:
            search_term: Optional text matched against code or name.

        Returns:
            list[AccountDTO]: Selectable accounts matching the term.
        """
        accounts = [
            account
            for account in self._ledger_repository.fetch_active_accounts()
            if is_selectable_account(account)
        ]
        if search_term:
            accounts = filter_accounts(accounts, search_term)
        self._logger.info(f"Fetched {len(accounts)} active accounts")
        return accounts


__all__ = ["GetAccountsUseCase", "AccountDTO"]
