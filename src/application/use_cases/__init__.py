"""Application use cases package."""

from .authenticate import LoginUseCase, LogoutUseCase
from .get_account_balances import GetAccountBalancesUseCase
from .get_bills_overview import BillsOverview, GetBillsOverviewUseCase
from .get_campaign_overview import GetCampaignOverviewUseCase
from .get_dashboard_summary import DashboardSummary, GetDashboardSummaryUseCase
from .get_monthly_report import GetMonthlyReportUseCase
from .manage_accounts import (
    AdjustConsolidatedBalanceUseCase,
    CreateAccountUseCase,
    DeleteAccountUseCase,
)
from .manage_bills import CreateBillUseCase, DeleteBillUseCase
from .manage_campaigns import (
    CompleteCampaignUseCase,
    CreateCampaignUseCase,
    CreateMissionIncomeUseCase,
    DeleteMissionIncomeUseCase,
)
from .manage_users import CreateUserUseCase, DeleteUserUseCase
from .pay_bill import BillPayment, PayBillUseCase
from .record_transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
)
from .sync_app_data import SyncAppDataUseCase, SyncResult

__all__ = [
    "LoginUseCase",
    "LogoutUseCase",
    "GetAccountBalancesUseCase",
    "BillsOverview",
    "GetBillsOverviewUseCase",
    "GetCampaignOverviewUseCase",
    "DashboardSummary",
    "GetDashboardSummaryUseCase",
    "GetMonthlyReportUseCase",
    "AdjustConsolidatedBalanceUseCase",
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "CreateBillUseCase",
    "DeleteBillUseCase",
    "CompleteCampaignUseCase",
    "CreateCampaignUseCase",
    "CreateMissionIncomeUseCase",
    "DeleteMissionIncomeUseCase",
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "BillPayment",
    "PayBillUseCase",
    "CreateTransactionUseCase",
    "DeleteTransactionUseCase",
    "SyncAppDataUseCase",
    "SyncResult",
]
