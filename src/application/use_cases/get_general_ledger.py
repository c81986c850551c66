"""Use case to assemble the general ledger of one account."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.get_opening_balance import (
    GetOpeningBalanceUseCase,
)
from src.domain.models import DateRangeSelection, GeneralLedgerReport
from src.domain.services.currency import CurrencyResolver
from src.domain.services.date_window import resolve_date_window
from src.domain.services.posting_assembler import assemble_postings
from src.infrastructure.logging.logger import get_app_logger

OPENING_BALANCE_NOTICE = (
    "Opening balance could not be loaded and is shown as zero."
)


class GetGeneralLedgerUseCase:
    """Compute opening balance, postings and running balances."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        currency_resolver: CurrencyResolver | None = None,
        opening_balance_use_case: GetOpeningBalanceUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger data.
            currency_resolver: Session currency lookup; empty when omitted.
            opening_balance_use_case: Optional opening balance use case.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._currency_resolver = currency_resolver or CurrencyResolver.empty()
        self._opening_balance_use_case = (
            opening_balance_use_case
            or GetOpeningBalanceUseCase(
                ledger_repository,
                logger=self._logger,
            )
        )

    def execute(
        self,
        account_id: str,
        selection: DateRangeSelection,
        today: date | None = None,
    ) -> GeneralLedgerReport:
        """Return the ledger report for the account and range.

        The opening balance is read before any header or line query since it
        seeds the running balance.

        Args:
            account_id: Account to report on.
            selection: Relative or custom date range.
            today: Current day; defaults to ``date.today()``.

        Returns:
            GeneralLedgerReport: Opening balance and ordered postings.

        Raises:
            InvalidRangeError: If the range cannot be resolved.
            QueryFailureError: If headers or lines cannot be fetched.
        """
        window = resolve_date_window(selection, today or date.today())
        opening = self._opening_balance_use_case.execute(
            account_id,
            window.start,
        )
        notices = (OPENING_BALANCE_NOTICE,) if opening.failed else ()
        base_code = self._currency_resolver.base_currency_code()

        headers = self._ledger_repository.fetch_headers_in_range(
            window.start,
            window.end,
        )
        if not headers:
            self._logger.info(
                f"No headers between {window.start} and {window.end}"
            )
            return GeneralLedgerReport(
                account_id=account_id,
                window=window,
                opening_balance=opening.opening_balance,
                postings=(),
                notices=notices,
                base_currency_code=base_code,
            )

        lines = self._ledger_repository.fetch_posting_lines(
            account_id,
            [header.id for header in headers],
        )
        postings = assemble_postings(
            headers,
            lines,
            opening.opening_balance,
            self._currency_resolver,
            self._logger,
        )
        self._logger.info(
            f"Assembled {len(postings)} postings for account {account_id} "
            f"between {window.start} and {window.end}"
        )
        return GeneralLedgerReport(
            account_id=account_id,
            window=window,
            opening_balance=opening.opening_balance,
            postings=tuple(postings),
            notices=notices,
            base_currency_code=base_code,
        )


__all__ = [
    "GetGeneralLedgerUseCase",
    "GeneralLedgerReport",
    "OPENING_BALANCE_NOTICE",
]
