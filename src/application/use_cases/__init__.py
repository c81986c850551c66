"""Application use cases package."""

from .general_ledger_session import GeneralLedgerSession, ReportRequest
from .get_accounts import AccountDTO, GetAccountsUseCase
from .get_general_ledger import GeneralLedgerReport, GetGeneralLedgerUseCase
from .get_opening_balance import (
    GetOpeningBalanceUseCase,
    OpeningBalanceResult,
)
from .load_currencies import LoadCurrencyResolverUseCase

__all__ = [
    "GeneralLedgerSession",
    "ReportRequest",
    "AccountDTO",
    "GetAccountsUseCase",
    "GeneralLedgerReport",
    "GetGeneralLedgerUseCase",
    "GetOpeningBalanceUseCase",
    "OpeningBalanceResult",
    "LoadCurrencyResolverUseCase",
]
