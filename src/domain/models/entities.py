"""Domain entities for the treasury dataset.

Entities created locally carry an empty ``id`` until the remote API
returns the persisted record.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Kind of money movement."""

    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"


class BillStatus(str, Enum):
    """Operator-driven bill status.

    ``OVERDUE`` is a legal value but nothing in this package writes it;
    urgency is derived separately from the due day.
    """

    PENDING = "Pendente"
    PAID = "Pago"
    OVERDUE = "Atrasado"


class UserRole(str, Enum):
    """Access role of a treasury user."""

    ADMIN = "Administrador"
    TREASURER = "Tesoureiro"
    VIEWER = "Observador"


class CampaignStatus(str, Enum):
    """Lifecycle of a mission campaign."""

    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(frozen=True)
class BankAccount:
    """Money container with a base offset balance.

    Attributes:
        initial_balance: Base offset, not the current balance.
    """

    id: str
    name: str
    type: str
    initial_balance: Decimal
    bank_name: str | None = None


@dataclass(frozen=True)
class Transaction:
    """Dated money movement; ``value`` is always positive."""

    id: str
    type: TransactionType
    value: Decimal
    date: date
    description: str
    category: str
    account_id: str
    to_account_id: str | None = None
    is_recurring: bool = False
    user_id: str | None = None
    attachment: str | None = None


@dataclass(frozen=True)
class Bill:
    """Payable obligation; ``due_date`` is a day of month (1-31)."""

    id: str
    description: str
    value: Decimal
    due_date: int
    category: str
    is_recurring: bool
    status: BillStatus
    last_payment_date: date | None = None


@dataclass(frozen=True)
class MissionCampaign:
    """Fundraising campaign with a target amount."""

    id: str
    name: str
    target: Decimal
    start_date: datetime
    status: CampaignStatus
    end_date: datetime | None = None

    @property
    def is_active(self) -> bool:
        """Return True while the campaign accepts incomes."""
        return self.status == CampaignStatus.ACTIVE


@dataclass(frozen=True)
class MissionIncome:
    """Contribution recorded against exactly one campaign."""

    id: str
    campaign_id: str
    source: str
    value: Decimal
    date: date
    description: str | None = None


@dataclass(frozen=True)
class MissionProject:
    """Named mission project with a fixed amount."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class MonthlyClosing:
    """Closing flag for a calendar month."""

    month: int
    year: int
    is_closed: bool
    closed_at: datetime | None = None


@dataclass(frozen=True)
class User:
    """Treasury user; ``password`` is write-only."""

    id: str
    name: str
    username: str
    role: UserRole
    password: str | None = None
    church_name: str | None = None
    pastor_name: str | None = None
    email: str | None = None


__all__ = [
    "TransactionType",
    "BillStatus",
    "UserRole",
    "CampaignStatus",
    "BankAccount",
    "Transaction",
    "Bill",
    "MissionCampaign",
    "MissionIncome",
    "MissionProject",
    "MonthlyClosing",
    "User",
]
