"""Aggregate root holding the full treasury snapshot."""

from dataclasses import dataclass, field, replace
from decimal import Decimal

from src.domain.constants import DEFAULT_MISSION_PROJECTS, DEFAULT_MISSION_TARGET
from src.domain.models.entities import (
    BankAccount,
    Bill,
    MissionCampaign,
    MissionIncome,
    MissionProject,
    MonthlyClosing,
    Transaction,
    User,
)


def default_mission_projects() -> list[MissionProject]:
    """Return the mission projects used when settings provide none."""
    return [
        MissionProject(name=name, value=value)
        for name, value in DEFAULT_MISSION_PROJECTS
    ]


@dataclass(frozen=True)
class AppData:
    """Immutable snapshot of every collection owned by the remote API.

    Changes go through the ``with_*`` methods, each of which returns a new
    snapshot with one sub-collection replaced.
    """

    users: list[User] = field(default_factory=list)
    accounts: list[BankAccount] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    bills: list[Bill] = field(default_factory=list)
    closings: list[MonthlyClosing] = field(default_factory=list)
    mission_target: Decimal = DEFAULT_MISSION_TARGET
    mission_projects: list[MissionProject] = field(
        default_factory=default_mission_projects
    )
    mission_campaigns: list[MissionCampaign] = field(default_factory=list)
    mission_incomes: list[MissionIncome] = field(default_factory=list)
    is_configured: bool = False

    # Transactions

    def with_transaction_added(self, transaction: Transaction) -> "AppData":
        return replace(self, transactions=[*self.transactions, transaction])

    def with_transaction_removed(self, transaction_id: str) -> "AppData":
        return replace(
            self,
            transactions=[
                t for t in self.transactions if t.id != transaction_id
            ],
        )

    # Accounts

    def with_account_added(self, account: BankAccount) -> "AppData":
        return replace(self, accounts=[*self.accounts, account])

    def with_account_replaced(self, account: BankAccount) -> "AppData":
        return replace(
            self,
            accounts=[
                account if a.id == account.id else a for a in self.accounts
            ],
        )

    def with_account_removed(self, account_id: str) -> "AppData":
        return replace(
            self,
            accounts=[a for a in self.accounts if a.id != account_id],
        )

    # Bills

    def with_bill_added(self, bill: Bill) -> "AppData":
        return replace(self, bills=[*self.bills, bill])

    def with_bill_replaced(self, bill: Bill) -> "AppData":
        return replace(
            self,
            bills=[bill if b.id == bill.id else b for b in self.bills],
        )

    def with_bill_removed(self, bill_id: str) -> "AppData":
        return replace(
            self,
            bills=[b for b in self.bills if b.id != bill_id],
        )

    # Missions

    def with_campaign_added(self, campaign: MissionCampaign) -> "AppData":
        return replace(
            self,
            mission_campaigns=[*self.mission_campaigns, campaign],
        )

    def with_campaign_replaced(self, campaign: MissionCampaign) -> "AppData":
        return replace(
            self,
            mission_campaigns=[
                campaign if c.id == campaign.id else c
                for c in self.mission_campaigns
            ],
        )

    def with_income_added(self, income: MissionIncome) -> "AppData":
        return replace(self, mission_incomes=[*self.mission_incomes, income])

    def with_income_removed(self, income_id: str) -> "AppData":
        return replace(
            self,
            mission_incomes=[
                i for i in self.mission_incomes if i.id != income_id
            ],
        )

    # Users

    def with_user_added(self, user: User) -> "AppData":
        return replace(self, users=[*self.users, user])

    def with_user_removed(self, user_id: str) -> "AppData":
        return replace(
            self,
            users=[u for u in self.users if u.id != user_id],
        )

    def with_session_user(self, user: User) -> "AppData":
        """Return a configured snapshot whose only known user is ``user``."""
        return replace(self, users=[user], is_configured=True)


__all__ = ["AppData", "default_mission_projects"]
