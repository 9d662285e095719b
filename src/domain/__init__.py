"""Domain package for treasury business rules and core models."""

from .errors import NotFoundError, RemoteApiError, TreasuryError, ValidationError
from .models import (
    AppData,
    BankAccount,
    Bill,
    BillStatus,
    CampaignStatus,
    MissionCampaign,
    MissionIncome,
    MonthlyStatement,
    Transaction,
    TransactionType,
    User,
    UserRole,
)
from .policies import can_delete_account, select_payment_account
from .services import (
    build_monthly_statement,
    campaign_progress,
    consolidated_balance,
    current_balance,
    monthly_stats,
)

__all__ = [
    "NotFoundError",
    "RemoteApiError",
    "TreasuryError",
    "ValidationError",
    "AppData",
    "BankAccount",
    "Bill",
    "BillStatus",
    "CampaignStatus",
    "MissionCampaign",
    "MissionIncome",
    "MonthlyStatement",
    "Transaction",
    "TransactionType",
    "User",
    "UserRole",
    "can_delete_account",
    "select_payment_account",
    "build_monthly_statement",
    "campaign_progress",
    "consolidated_balance",
    "current_balance",
    "monthly_stats",
]
