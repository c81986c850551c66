"""Domain policies package."""

from .account_filters import filter_accounts, is_selectable_account

__all__ = ["filter_accounts", "is_selectable_account"]
