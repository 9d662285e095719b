"""Port for the remote treasury REST API.

The remote API owns every record. Implementations return the records as
persisted by the server (with their assigned ids) and raise
``RemoteApiError`` on any transport or HTTP failure.
"""

from pathlib import Path
from typing import Protocol

from src.domain.models import (
    AppData,
    BankAccount,
    Bill,
    MissionCampaign,
    MissionIncome,
    Transaction,
    User,
)


class TreasuryApiPort(Protocol):
    """Port exposing the remote treasury operations."""

    def login(self, username: str, password: str) -> tuple[str, User]:
        """Authenticate and return the bearer token and the session user."""

    def fetch_app_data(self) -> AppData:
        """Fetch every collection and assemble a configured snapshot."""

    def create_transaction(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction by id."""

    def upload_attachment(self, file_path: Path) -> str:
        """Upload a receipt file and return its public URL."""

    def create_account(self, account: BankAccount) -> BankAccount:
        """Persist a new bank account."""

    def update_account(self, account: BankAccount) -> BankAccount:
        """Replace an existing bank account."""

    def delete_account(self, account_id: str) -> None:
        """Delete a bank account by id."""

    def create_bill(self, bill: Bill) -> Bill:
        """Persist a new bill."""

    def update_bill(self, bill: Bill) -> Bill:
        """Replace an existing bill."""

    def delete_bill(self, bill_id: str) -> None:
        """Delete a bill by id."""

    def create_campaign(self, campaign: MissionCampaign) -> MissionCampaign:
        """Persist a new mission campaign."""

    def complete_campaign(self, campaign: MissionCampaign) -> MissionCampaign:
        """Send the completed status and end date of a campaign."""

    def create_mission_income(self, income: MissionIncome) -> MissionIncome:
        """Persist a new mission income."""

    def delete_mission_income(self, income_id: str) -> None:
        """Delete a mission income by id."""

    def create_user(self, user: User) -> User:
        """Persist a new user; the password travels only in this call."""

    def delete_user(self, user_id: str) -> None:
        """Delete a user by id."""


__all__ = ["TreasuryApiPort"]
