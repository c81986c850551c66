"""Use case to compute an account opening balance."""

from dataclasses import dataclass
from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import POSTED_STATUS
from src.domain.errors import QueryFailureError
from src.domain.models import OpeningBalance
from src.domain.services.opening_balance import compute_opening_balance
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class OpeningBalanceResult:
    """Opening balance plus the recoverable error that zeroed it, if any."""

    opening_balance: OpeningBalance
    error: QueryFailureError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class GetOpeningBalanceUseCase:
    """Sum posted postings of an account before a cutoff date."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        posted_status: str = POSTED_STATUS,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            posted_status: Header status counted as posted.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._posted_status = posted_status

    def execute(self, account_id: str, cutoff: date) -> OpeningBalanceResult:
        """Return the opening balance of ``account_id`` at ``cutoff``.

        A failing query yields a zero balance together with the error so the
        report can still render with a visibly suspect opening balance.

        Args:
            account_id: Account to summarize.
            cutoff: First day of the report window (excluded).

        Returns:
            OpeningBalanceResult: Balance and optional recoverable error.
        """
        try:
            rows = self._ledger_repository.fetch_prior_postings(
                account_id,
                cutoff,
            )
        except QueryFailureError as exc:
            self._logger.warning(
                f"Opening balance unavailable for account {account_id}: {exc}"
            )
            return OpeningBalanceResult(
                opening_balance=OpeningBalance.zero(),
                error=exc,
            )
        opening_balance = compute_opening_balance(
            rows,
            cutoff,
            posted_status=self._posted_status,
        )
        self._logger.info(
            f"Opening balance for account {account_id} before {cutoff}: "
            f"{opening_balance.balance}"
        )
        return OpeningBalanceResult(opening_balance=opening_balance)


__all__ = ["GetOpeningBalanceUseCase", "OpeningBalanceResult"]
