"""Domain models for financial aggregates."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.domain.models.entities import (
    BankAccount,
    Bill,
    MissionCampaign,
    Transaction,
)


@dataclass(frozen=True)
class AccountBalance:
    """Current balance of a single account."""

    account: BankAccount
    balance: Decimal


@dataclass(frozen=True)
class MonthlyStats:
    """Income and expense totals for one calendar month.

    Attributes:
        total_income: Sum of INCOME values in the period.
        total_expense: Sum of EXPENSE values in the period.
        net_balance: Income minus expense.
        count_income: Number of INCOME transactions.
        count_expense: Number of EXPENSE transactions.
    """

    total_income: Decimal
    total_expense: Decimal
    net_balance: Decimal
    count_income: int
    count_expense: int


@dataclass(frozen=True)
class TrendPoint:
    """Income/expense pair for one month of the trailing series."""

    label: str
    month: int
    year: int
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class BillBucketTotals:
    """Sum of bill values per stored status."""

    pending: Decimal
    overdue: Decimal
    paid: Decimal

    @property
    def total(self) -> Decimal:
        """Return the sum of all buckets."""
        return self.pending + self.overdue + self.paid


class UrgencyLevel(str, Enum):
    """Presentation urgency of an unpaid bill."""

    URGENT = "urgent"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class BillAlert:
    """Unpaid bill with its derived urgency."""

    bill: Bill
    days_until: int
    level: UrgencyLevel
    label: str


@dataclass(frozen=True)
class CampaignProgress:
    """Progress of a campaign towards its target.

    ``percentage`` is not clamped: a campaign can report ``"125.00"``.
    """

    raised: Decimal
    target: Decimal
    percentage: str
    remaining: Decimal

    @property
    def percentage_value(self) -> Decimal:
        """Return the percentage as a Decimal."""
        return Decimal(self.percentage)


@dataclass(frozen=True)
class SourceShare:
    """Amount raised from one mission source."""

    source: str
    value: Decimal
    percentage: str


@dataclass(frozen=True)
class CampaignOverview:
    """Everything the missions view needs."""

    active: MissionCampaign | None
    progress: CampaignProgress
    breakdown: list[SourceShare]
    completed: list[MissionCampaign]


@dataclass(frozen=True)
class MonthlyStatement:
    """Monthly financial statement.

    Attributes:
        tithes: INCOME transactions in the "Dízimos" category.
        offerings: INCOME transactions in the "Ofertas" category.
        other_income: Remaining INCOME transactions.
        expenses: EXPENSE transactions, ungrouped.
        opening_balance: Consolidated balance before the period starts.
        period_net: Period income minus period expense.
        closing_balance: Opening balance plus period net.
        transaction_count: Number of transactions of any type in the period.
    """

    month: int
    year: int
    tithes: list[Transaction]
    offerings: list[Transaction]
    other_income: list[Transaction]
    expenses: list[Transaction]
    total_tithes: Decimal
    total_offerings: Decimal
    total_other_income: Decimal
    total_income: Decimal
    total_expense: Decimal
    opening_balance: Decimal
    period_net: Decimal
    closing_balance: Decimal
    income_by_category: dict[str, Decimal]
    expense_by_category: dict[str, Decimal]
    transaction_count: int


__all__ = [
    "AccountBalance",
    "MonthlyStats",
    "TrendPoint",
    "BillBucketTotals",
    "UrgencyLevel",
    "BillAlert",
    "CampaignProgress",
    "SourceShare",
    "CampaignOverview",
    "MonthlyStatement",
]
