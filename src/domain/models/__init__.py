"""Domain models package."""

from .app_data import AppData, default_mission_projects
from .entities import (
    BankAccount,
    Bill,
    BillStatus,
    CampaignStatus,
    MissionCampaign,
    MissionIncome,
    MissionProject,
    MonthlyClosing,
    Transaction,
    TransactionType,
    User,
    UserRole,
)
from .finance import (
    AccountBalance,
    BillAlert,
    BillBucketTotals,
    CampaignOverview,
    CampaignProgress,
    MonthlyStatement,
    MonthlyStats,
    SourceShare,
    TrendPoint,
    UrgencyLevel,
)

__all__ = [
    "AppData",
    "default_mission_projects",
    "BankAccount",
    "Bill",
    "BillStatus",
    "CampaignStatus",
    "MissionCampaign",
    "MissionIncome",
    "MissionProject",
    "MonthlyClosing",
    "Transaction",
    "TransactionType",
    "User",
    "UserRole",
    "AccountBalance",
    "BillAlert",
    "BillBucketTotals",
    "CampaignOverview",
    "CampaignProgress",
    "MonthlyStatement",
    "MonthlyStats",
    "SourceShare",
    "TrendPoint",
    "UrgencyLevel",
]
