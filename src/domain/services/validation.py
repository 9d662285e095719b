"""Domain validation for entities about to be persisted.

Every check runs before any remote call and raises ``ValidationError``
with a message fit for the operator.
"""

from decimal import Decimal

from src.domain.constants import MISSION_SOURCES
from src.domain.errors import ValidationError
from src.domain.models import (
    BankAccount,
    Bill,
    MissionCampaign,
    MissionIncome,
    Transaction,
    TransactionType,
    User,
)


def _require_text(value: str | None, field_name: str) -> None:
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} is required")


def _require_positive(value: Decimal, field_name: str) -> None:
    if value <= 0:
        raise ValidationError(f"{field_name} must be greater than zero")


def validate_transaction(
    transaction: Transaction,
    accounts: list[BankAccount],
) -> None:
    """Validate a transaction against the known accounts.

    Args:
        transaction: Transaction about to be created.
        accounts: Accounts of the current snapshot.

    Raises:
        ValidationError: On a missing field, a non-positive value, an
            unknown account or an invalid transfer destination.
    """
    _require_text(transaction.description, "Description")
    _require_text(transaction.category, "Category")
    _require_positive(transaction.value, "Value")
    known_ids = {account.id for account in accounts}
    if transaction.account_id not in known_ids:
        raise ValidationError(f"Unknown account: {transaction.account_id}")
    if transaction.type == TransactionType.TRANSFER:
        if not transaction.to_account_id:
            raise ValidationError("Transfer requires a destination account")
        if transaction.to_account_id == transaction.account_id:
            raise ValidationError("Transfer destination must differ from source")
        if transaction.to_account_id not in known_ids:
            raise ValidationError(
                f"Unknown destination account: {transaction.to_account_id}"
            )
    elif transaction.to_account_id:
        raise ValidationError("Only transfers may have a destination account")


def validate_account(account: BankAccount) -> None:
    """Validate a bank account; the initial balance may be negative."""
    _require_text(account.name, "Account name")
    _require_text(account.type, "Account type")


def validate_bill(bill: Bill) -> None:
    """Validate a bill before creation.

    Raises:
        ValidationError: On empty description, non-positive value or a due
            day outside 1-31.
    """
    _require_text(bill.description, "Description")
    _require_text(bill.category, "Category")
    _require_positive(bill.value, "Value")
    if not 1 <= bill.due_date <= 31:
        raise ValidationError(f"Due day must be between 1 and 31: {bill.due_date}")


def validate_campaign(campaign: MissionCampaign) -> None:
    """Validate a campaign name and target."""
    _require_text(campaign.name, "Campaign name")
    _require_positive(campaign.target, "Target")


def validate_mission_income(income: MissionIncome) -> None:
    """Validate a mission income source and value."""
    if income.source not in MISSION_SOURCES:
        raise ValidationError(f"Unknown mission source: {income.source}")
    _require_positive(income.value, "Value")


def validate_user(user: User) -> None:
    """Validate a user about to be created; a password is mandatory."""
    _require_text(user.name, "Name")
    _require_text(user.username, "Username")
    _require_text(user.password, "Password")


__all__ = [
    "validate_transaction",
    "validate_account",
    "validate_bill",
    "validate_campaign",
    "validate_mission_income",
    "validate_user",
]
