"""Domain services package."""

from .balances import (
    account_balances,
    adjust_consolidated_balance,
    balance_contribution,
    consolidated_balance,
    current_balance,
)
from .bills import (
    bill_alerts,
    bucket_totals,
    build_bill_payment,
    classify_urgency,
    days_until_due,
    filter_by_status,
)
from .campaigns import (
    active_campaign,
    campaign_incomes,
    campaign_progress,
    complete_campaign,
    completed_campaigns,
    ensure_can_create_campaign,
    source_breakdown,
)
from .periods import (
    category_breakdown,
    in_period,
    monthly_stats,
    period_transactions,
    trailing_series,
)
from .reports import available_years, build_monthly_statement, opening_balance
from .validation import (
    validate_account,
    validate_bill,
    validate_campaign,
    validate_mission_income,
    validate_transaction,
    validate_user,
)

__all__ = [
    "account_balances",
    "adjust_consolidated_balance",
    "balance_contribution",
    "consolidated_balance",
    "current_balance",
    "bill_alerts",
    "bucket_totals",
    "build_bill_payment",
    "classify_urgency",
    "days_until_due",
    "filter_by_status",
    "active_campaign",
    "campaign_incomes",
    "campaign_progress",
    "complete_campaign",
    "completed_campaigns",
    "ensure_can_create_campaign",
    "source_breakdown",
    "category_breakdown",
    "in_period",
    "monthly_stats",
    "period_transactions",
    "trailing_series",
    "available_years",
    "build_monthly_statement",
    "opening_balance",
    "validate_account",
    "validate_bill",
    "validate_campaign",
    "validate_mission_income",
    "validate_transaction",
    "validate_user",
]
