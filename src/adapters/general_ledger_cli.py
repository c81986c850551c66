"""CLI adapter printing the general ledger of one account.

The account and window are read from environment variables so the command
can run unattended:

    LEDGER_ACCOUNT       account id or code (required)
    LEDGER_RANGE         last_week, last_month or custom
    LEDGER_START_DATE    custom start, YYYY-MM-DD
    LEDGER_END_DATE      custom end, YYYY-MM-DD
    LEDGER_SEARCH        optional free-text search
    LEDGER_SEARCH_COLUMN all, date, type, narration, currency or amount
"""

import os

from src.adapters.interface.ledger_projection import format_amount, project
from src.domain.constants import SEARCH_ALL, SEARCH_COLUMNS
from src.domain.models import AccountDTO, DateRangeSelection, LedgerTable
from src.infrastructure.container import (
    build_accounts_use_case,
    build_general_ledger_session,
    build_ledger_repository,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


def _find_account(
    accounts: list[AccountDTO],
    value: str,
) -> AccountDTO | None:
    """Return the account whose id or code equals ``value``."""
    for account in accounts:
        if value in (account.id, account.code):
            return account
    return None


def _render_table(table: LedgerTable) -> list[str]:
    """Render a projected table as aligned text lines."""
    widths = {
        column: max(
            [len(column)] + [len(record[column]) for record in table.records]
        )
        for column in table.columns
    }
    lines = [
        "  ".join(column.ljust(widths[column]) for column in table.columns)
    ]
    lines.append("  ".join("-" * widths[column] for column in table.columns))
    for record in table.records:
        lines.append(
            "  ".join(
                record[column].ljust(widths[column])
                for column in table.columns
            )
        )
    return lines


def main() -> None:
    """Load the configured account ledger and print it."""
    logger = get_app_logger()
    account_value = os.getenv("LEDGER_ACCOUNT", "").strip()
    if not account_value:
        logger.warning("LEDGER_ACCOUNT is required to print a ledger.")
        return

    settings = LedgerSettings.from_env()
    repository = build_ledger_repository(settings=settings)
    accounts = build_accounts_use_case(repository).execute()
    account = _find_account(accounts, account_value)
    if account is None:
        logger.warning(f"Unknown or inactive account '{account_value}'.")
        return

    selection = DateRangeSelection(
        kind=os.getenv("LEDGER_RANGE", settings.default_range).strip().lower(),
        custom_start=os.getenv("LEDGER_START_DATE"),
        custom_end=os.getenv("LEDGER_END_DATE"),
    )
    search_column = os.getenv("LEDGER_SEARCH_COLUMN", SEARCH_ALL).strip()
    if search_column not in SEARCH_COLUMNS:
        logger.warning(
            f"Invalid LEDGER_SEARCH_COLUMN '{search_column}', using 'all'."
        )
        search_column = SEARCH_ALL

    session = build_general_ledger_session(
        repository=repository,
        settings=settings,
    )
    session.load(account.id, selection)
    if session.error:
        logger.error(session.error)
        print(f"Error: {session.error}")
        return
    report = session.report
    session.update_view(
        search_text=os.getenv("LEDGER_SEARCH", ""),
        search_column=search_column,
    )
    rows = session.visible_rows()
    table = project(
        rows,
        report.opening_balance,
        settings.display_mode,
        closing_balance=report.closing_balance,
    )

    print(f"General Ledger: {account.label}")
    print(
        f"Period: {report.window.start:%d/%m/%Y} "
        f"to {report.window.end:%d/%m/%Y}"
    )
    print(f"Opening Balance: {format_amount(report.opening_balance.balance)}")
    if report.base_currency_code:
        print(f"Base Currency: {report.base_currency_code}")
    for notice in report.notices:
        print(f"Notice: {notice}")
    for line in _render_table(table):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
