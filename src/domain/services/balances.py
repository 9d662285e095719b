"""Balance engine: account balances derived from transactions."""

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_ACCOUNT_ID,
    DEFAULT_ACCOUNT_NAME,
    DEFAULT_ACCOUNT_TYPE,
)
from src.domain.models import (
    AccountBalance,
    BankAccount,
    Transaction,
    TransactionType,
)


def balance_contribution(transaction: Transaction, account_id: str) -> Decimal:
    """Return the signed effect of a transaction on one account.

    Args:
        transaction: Transaction to evaluate.
        account_id: Account whose balance is being computed.

    Returns:
        Decimal: Positive for money arriving, negative for money leaving.
    """
    amount = Decimal("0")
    if transaction.account_id == account_id:
        if transaction.type == TransactionType.INCOME:
            amount += transaction.value
        else:
            # EXPENSE and the outgoing leg of a TRANSFER.
            amount -= transaction.value
    if (
        transaction.type == TransactionType.TRANSFER
        and transaction.to_account_id == account_id
    ):
        amount += transaction.value
    return amount


def current_balance(
    account: BankAccount,
    transactions: Iterable[Transaction],
) -> Decimal:
    """Compute an account's balance from its base offset.

    Args:
        account: Account to evaluate.
        transactions: Every known transaction, in any order.

    Returns:
        Decimal: ``initial_balance`` plus all signed contributions.
    """
    return sum(
        (balance_contribution(t, account.id) for t in transactions),
        account.initial_balance,
    )


def account_balances(
    accounts: list[BankAccount],
    transactions: list[Transaction],
) -> list[AccountBalance]:
    """Return current balances for every account, in input order."""
    return [
        AccountBalance(
            account=account,
            balance=current_balance(account, transactions),
        )
        for account in accounts
    ]


def consolidated_balance(
    accounts: list[BankAccount],
    transactions: list[Transaction],
) -> Decimal:
    """Return the sum of current balances over all accounts."""
    return sum(
        (current_balance(account, transactions) for account in accounts),
        Decimal("0"),
    )


def adjust_consolidated_balance(
    accounts: list[BankAccount],
    transactions: list[Transaction],
    new_total: Decimal,
) -> BankAccount:
    """Return the single account that absorbs a consolidated-total edit.

    The whole difference goes to the first account's initial balance; it
    is never spread across accounts. Without accounts, a default cash
    account is synthesized holding the requested total.

    Args:
        accounts: Accounts in snapshot order.
        transactions: Every known transaction.
        new_total: Desired consolidated balance.

    Returns:
        BankAccount: Updated first account, or the synthesized one.
    """
    if not accounts:
        return BankAccount(
            id=DEFAULT_ACCOUNT_ID,
            name=DEFAULT_ACCOUNT_NAME,
            type=DEFAULT_ACCOUNT_TYPE,
            initial_balance=new_total,
        )
    delta = new_total - consolidated_balance(accounts, transactions)
    first = accounts[0]
    return replace(first, initial_balance=first.initial_balance + delta)


__all__ = [
    "balance_contribution",
    "current_balance",
    "account_balances",
    "consolidated_balance",
    "adjust_consolidated_balance",
]
