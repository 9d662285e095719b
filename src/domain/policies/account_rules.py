"""Account selection and deletion rules."""

from src.domain.errors import ValidationError
from src.domain.models import BankAccount, Transaction


def select_payment_account(accounts: list[BankAccount]) -> BankAccount:
    """Return the account that pays bills.

    The first account of the snapshot always pays; there is no user choice.

    Args:
        accounts: Accounts in snapshot order.

    Returns:
        BankAccount: First account.

    Raises:
        ValidationError: If no account exists.
    """
    if not accounts:
        raise ValidationError("No account available to pay the bill")
    return accounts[0]


def account_in_use(account_id: str, transactions: list[Transaction]) -> bool:
    """Return True when any transaction references the account."""
    return any(
        t.account_id == account_id or t.to_account_id == account_id
        for t in transactions
    )


def can_delete_account(account_id: str, transactions: list[Transaction]) -> bool:
    """Return True when the account can be removed without orphaning history."""
    return not account_in_use(account_id, transactions)


__all__ = ["select_payment_account", "account_in_use", "can_delete_account"]
