"""Report session owning the current general ledger and its view state.

Each account or date range change starts a new request with a fresh token.
Results are committed only while their token is still the latest one, so a
slow response for an older selection can never overwrite a newer report.
"""

from dataclasses import dataclass, replace
from datetime import date

from src.application.use_cases.get_general_ledger import (
    GetGeneralLedgerUseCase,
)
from src.domain.errors import InvalidRangeError, LedgerError
from src.domain.models import (
    DateRangeSelection,
    GeneralLedgerReport,
    LedgerViewState,
    MergedTransaction,
)
from src.domain.services.ledger_view import derive_view_from_state
from src.infrastructure.logging.logger import get_app_logger

QUERY_FAILURE_MESSAGE = (
    "Failed to fetch transactions. Please ensure all dates are valid."
)


@dataclass(frozen=True)
class ReportRequest:
    """Selection being loaded, tagged with its generation token."""

    token: int
    account_id: str
    selection: DateRangeSelection


class GeneralLedgerSession:
    """Hold the current report, its error state and the view state."""

    def __init__(
        self,
        general_ledger_use_case: GetGeneralLedgerUseCase,
        logger=None,
        view_state: LedgerViewState | None = None,
    ) -> None:
        self._use_case = general_ledger_use_case
        self._logger = logger or get_app_logger()
        self._generation = 0
        self._pending: ReportRequest | None = None
        self.report: GeneralLedgerReport | None = None
        self.error: str | None = None
        self.range_error = False
        self.view_state = view_state or LedgerViewState()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_loading(self) -> bool:
        return self._pending is not None

    def begin_selection(
        self,
        account_id: str,
        selection: DateRangeSelection,
    ) -> ReportRequest:
        """Start loading a new selection and invalidate older requests."""
        self._generation += 1
        request = ReportRequest(
            token=self._generation,
            account_id=account_id,
            selection=selection,
        )
        self._pending = request
        return request

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def apply_report(self, token: int, report: GeneralLedgerReport) -> bool:
        """Commit ``report`` if ``token`` is still current.

        Returns:
            bool: False when the report was stale and discarded.
        """
        if not self.is_current(token):
            self._logger.info(
                f"Discarding stale report for token {token} "
                f"(current {self._generation})"
            )
            return False
        self.report = report
        self.error = None
        self.range_error = False
        self._pending = None
        return True

    def apply_failure(self, token: int, error: LedgerError) -> bool:
        """Clear the report and record ``error`` if ``token`` is current.

        Returns:
            bool: False when the failure was stale and discarded.
        """
        if not self.is_current(token):
            self._logger.info(f"Discarding stale failure for token {token}")
            return False
        self.report = None
        self.range_error = isinstance(error, InvalidRangeError)
        self.error = str(error) if self.range_error else QUERY_FAILURE_MESSAGE
        self._pending = None
        self._logger.error(f"General ledger load failed: {error}")
        return True

    def load(
        self,
        account_id: str,
        selection: DateRangeSelection,
        today: date | None = None,
    ) -> bool:
        """Load the report for a selection and commit it if still current.

        Args:
            account_id: Account to report on.
            selection: Relative or custom date range.
            today: Current day; defaults to ``date.today()``.

        Returns:
            bool: True when the result (report or failure) was committed.
        """
        request = self.begin_selection(account_id, selection)
        try:
            report = self._use_case.execute(
                request.account_id,
                request.selection,
                today=today,
            )
        except LedgerError as exc:
            return self.apply_failure(request.token, exc)
        return self.apply_report(request.token, report)

    def clear(self) -> None:
        """Drop the current report, e.g. when no account is selected."""
        self._generation += 1
        self._pending = None
        self.report = None
        self.error = None
        self.range_error = False

    def update_view(self, **changes) -> LedgerViewState:
        """Replace view state fields such as ``search_text``."""
        self.view_state = replace(self.view_state, **changes)
        return self.view_state

    def set_filter(self, column: str, value: str) -> LedgerViewState:
        self.view_state = self.view_state.with_filter(column, value)
        return self.view_state

    def toggle_sort(self, column: str) -> LedgerViewState:
        """Flip or switch the sort column as a header click would."""
        self.view_state = replace(
            self.view_state,
            sort=self.view_state.sort.toggled(column),
        )
        return self.view_state

    def visible_rows(self) -> list[MergedTransaction]:
        """Return the report postings after search, filters and sort."""
        if self.report is None:
            return []
        return derive_view_from_state(self.report.postings, self.view_state)


__all__ = ["GeneralLedgerSession", "ReportRequest", "QUERY_FAILURE_MESSAGE"]
