"""Account picker policies."""

from collections.abc import Iterable

from src.domain.models import AccountDTO
from src.domain.services.normalization import normalize_text


def is_selectable_account(account: AccountDTO) -> bool:
    """Return True when the account has both a code and a name.

    Args:
        account: Account read from the chart of accounts.

    Returns:
        bool: True when the account can be offered in the picker.
    """
    return bool(account.code and account.code.strip()) and bool(
        account.name and account.name.strip()
    )


def filter_accounts(
    accounts: Iterable[AccountDTO],
    term: str,
) -> list[AccountDTO]:
    """Keep accounts whose code or name contains ``term``.

    Args:
        accounts: Accounts in display order.
        term: Case-insensitive search term; empty keeps every account.

    Returns:
        list[AccountDTO]: Matching accounts in their original order.
    """
    needle = normalize_text(term.strip())
    return [
        account
        for account in accounts
        if needle in normalize_text(account.code)
        or needle in normalize_text(account.name)
    ]


__all__ = ["is_selectable_account", "filter_accounts"]
