"""Domain policies package."""

from .account_rules import (
    account_in_use,
    can_delete_account,
    select_payment_account,
)

__all__ = ["account_in_use", "can_delete_account", "select_payment_account"]
