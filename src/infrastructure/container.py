"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.general_ledger_session import (
    GeneralLedgerSession,
)
from src.application.use_cases.get_accounts import GetAccountsUseCase
from src.application.use_cases.get_general_ledger import (
    GetGeneralLedgerUseCase,
)
from src.application.use_cases.get_opening_balance import (
    GetOpeningBalanceUseCase,
)
from src.application.use_cases.load_currencies import (
    LoadCurrencyResolverUseCase,
)
from src.domain.services.currency import CurrencyResolver
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the SQLAlchemy ledger repository."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyLedgerRepository(
        resolved_db,
        posted_status=resolved_settings.posted_status,
    )


def build_accounts_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetAccountsUseCase:
    """Return the use case listing active accounts."""
    return GetAccountsUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_currency_resolver(
    repository: LedgerRepositoryPort | None = None,
) -> CurrencyResolver:
    """Return the currency lookup for a new session."""
    use_case = LoadCurrencyResolverUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )
    return use_case.execute()


def build_general_ledger_use_case(
    repository: LedgerRepositoryPort | None = None,
    currency_resolver: CurrencyResolver | None = None,
    settings: LedgerSettings | None = None,
) -> GetGeneralLedgerUseCase:
    """Return the general ledger use case wired to the repository."""
    resolved_settings = settings or LedgerSettings.from_env()
    resolved_repository = repository or build_ledger_repository(
        settings=resolved_settings
    )
    logger = get_app_logger()
    resolver = currency_resolver or build_currency_resolver(
        resolved_repository
    )
    return GetGeneralLedgerUseCase(
        resolved_repository,
        currency_resolver=resolver,
        opening_balance_use_case=GetOpeningBalanceUseCase(
            resolved_repository,
            logger=logger,
            posted_status=resolved_settings.posted_status,
        ),
        logger=logger,
    )


def build_general_ledger_session(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> GeneralLedgerSession:
    """Return a report session with a fresh currency snapshot."""
    use_case = build_general_ledger_use_case(
        repository=repository,
        settings=settings,
    )
    return GeneralLedgerSession(use_case, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_accounts_use_case",
    "build_currency_resolver",
    "build_general_ledger_use_case",
    "build_general_ledger_session",
]
