"""JSON codec between domain entities and camelCase payloads.

The same field names are used on the wire and in the local cache. Money
differs: the API speaks JSON numbers, while the cache keeps Decimal
strings so a round trip through the cache is exact.
"""

from decimal import Decimal
from typing import Any

from src.domain.constants import DEFAULT_MISSION_TARGET
from src.domain.models import (
    AppData,
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
    default_mission_projects,
)
from src.utils.date_utils import parse_calendar_date, parse_timestamp
from src.utils.decimal_utils import coerce_decimal

Payload = dict[str, Any]


def _money(value: Decimal, for_api: bool) -> float | str:
    return float(value) if for_api else str(value)


def _optional_str(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _id(payload: Payload) -> str:
    raw = payload.get("id")
    return "" if raw is None else str(raw)


def _without_none(payload: Payload) -> Payload:
    return {key: value for key, value in payload.items() if value is not None}


# Accounts


def account_from_json(payload: Payload) -> BankAccount:
    return BankAccount(
        id=_id(payload),
        name=str(payload.get("name") or ""),
        type=str(payload.get("type") or ""),
        initial_balance=coerce_decimal(payload.get("initialBalance")),
        bank_name=_optional_str(payload.get("bankName")),
    )


def account_to_json(account: BankAccount, for_api: bool = True) -> Payload:
    return _without_none(
        {
            "id": account.id or None,
            "name": account.name,
            "bankName": account.bank_name,
            "type": account.type,
            "initialBalance": _money(account.initial_balance, for_api),
        }
    )


# Transactions


def transaction_from_json(payload: Payload) -> Transaction:
    return Transaction(
        id=_id(payload),
        type=TransactionType(payload["type"]),
        value=coerce_decimal(payload.get("value")),
        date=parse_calendar_date(payload.get("date")),
        description=str(payload.get("description") or ""),
        category=str(payload.get("category") or ""),
        account_id=str(payload.get("accountId") or ""),
        to_account_id=_optional_str(payload.get("toAccountId")),
        is_recurring=bool(payload.get("isRecurring", False)),
        user_id=_optional_str(payload.get("userId")),
        attachment=_optional_str(payload.get("attachment")),
    )


def transaction_to_json(
    transaction: Transaction,
    for_api: bool = True,
) -> Payload:
    return _without_none(
        {
            "id": transaction.id or None,
            "type": transaction.type.value,
            "value": _money(transaction.value, for_api),
            "date": transaction.date.isoformat(),
            "description": transaction.description,
            "category": transaction.category,
            "accountId": transaction.account_id,
            "toAccountId": transaction.to_account_id,
            "isRecurring": transaction.is_recurring,
            "userId": transaction.user_id,
            "attachment": transaction.attachment,
        }
    )


# Bills


def bill_from_json(payload: Payload) -> Bill:
    last_payment = payload.get("lastPaymentDate")
    return Bill(
        id=_id(payload),
        description=str(payload.get("description") or ""),
        value=coerce_decimal(payload.get("value")),
        due_date=int(payload.get("dueDate") or 1),
        category=str(payload.get("category") or ""),
        is_recurring=bool(payload.get("isRecurring", False)),
        status=BillStatus(payload.get("status") or BillStatus.PENDING.value),
        last_payment_date=(
            parse_calendar_date(last_payment) if last_payment else None
        ),
    )


def bill_to_json(bill: Bill, for_api: bool = True) -> Payload:
    return _without_none(
        {
            "id": bill.id or None,
            "description": bill.description,
            "value": _money(bill.value, for_api),
            "dueDate": bill.due_date,
            "category": bill.category,
            "isRecurring": bill.is_recurring,
            "status": bill.status.value,
            "lastPaymentDate": (
                bill.last_payment_date.isoformat()
                if bill.last_payment_date
                else None
            ),
        }
    )


# Missions


def campaign_from_json(payload: Payload) -> MissionCampaign:
    return MissionCampaign(
        id=_id(payload),
        name=str(payload.get("name") or ""),
        target=coerce_decimal(payload.get("target")),
        start_date=parse_timestamp(payload.get("startDate")),
        status=CampaignStatus(payload.get("status") or CampaignStatus.ACTIVE.value),
        end_date=parse_timestamp(payload.get("endDate")),
    )


def campaign_to_json(campaign: MissionCampaign, for_api: bool = True) -> Payload:
    return _without_none(
        {
            "id": campaign.id or None,
            "name": campaign.name,
            "target": _money(campaign.target, for_api),
            "startDate": (
                campaign.start_date.isoformat() if campaign.start_date else None
            ),
            "endDate": campaign.end_date.isoformat() if campaign.end_date else None,
            "status": campaign.status.value,
        }
    )


def income_from_json(payload: Payload) -> MissionIncome:
    return MissionIncome(
        id=_id(payload),
        campaign_id=str(payload.get("campaignId") or ""),
        source=str(payload.get("source") or ""),
        value=coerce_decimal(payload.get("value")),
        date=parse_calendar_date(payload.get("date")),
        description=_optional_str(payload.get("description")),
    )


def income_to_json(income: MissionIncome, for_api: bool = True) -> Payload:
    return _without_none(
        {
            "id": income.id or None,
            "campaignId": income.campaign_id,
            "source": income.source,
            "value": _money(income.value, for_api),
            "date": income.date.isoformat(),
            "description": income.description,
        }
    )


def project_from_json(payload: Payload) -> MissionProject:
    return MissionProject(
        name=str(payload.get("name") or ""),
        value=coerce_decimal(payload.get("value")),
    )


def project_to_json(project: MissionProject, for_api: bool = True) -> Payload:
    return {"name": project.name, "value": _money(project.value, for_api)}


# Closings and users


def closing_from_json(payload: Payload) -> MonthlyClosing:
    return MonthlyClosing(
        month=int(payload.get("month") or 1),
        year=int(payload.get("year") or 0),
        is_closed=bool(payload.get("isClosed", False)),
        closed_at=parse_timestamp(payload.get("closedAt")),
    )


def closing_to_json(closing: MonthlyClosing) -> Payload:
    return _without_none(
        {
            "month": closing.month,
            "year": closing.year,
            "isClosed": closing.is_closed,
            "closedAt": closing.closed_at.isoformat() if closing.closed_at else None,
        }
    )


def user_from_json(payload: Payload) -> User:
    """Parse a user; any password in the payload is dropped."""
    return User(
        id=_id(payload),
        name=str(payload.get("name") or ""),
        username=str(payload.get("username") or ""),
        role=UserRole(payload.get("role") or UserRole.VIEWER.value),
        church_name=_optional_str(payload.get("churchName")),
        pastor_name=_optional_str(payload.get("pastorName")),
        email=_optional_str(payload.get("email")),
    )


def user_to_json(user: User, include_password: bool = False) -> Payload:
    """Serialize a user; the password is only sent on creation."""
    return _without_none(
        {
            "id": user.id or None,
            "name": user.name,
            "username": user.username,
            "password": user.password if include_password else None,
            "role": user.role.value,
            "churchName": user.church_name,
            "pastorName": user.pastor_name,
            "email": user.email,
        }
    )


# Settings and snapshot


def mission_settings_from_json(
    payload: Payload | None,
) -> tuple[Decimal, list[MissionProject]]:
    """Read ``missionTarget`` and ``missionProjects`` from ``/settings``.

    A missing or zero target falls back to the default target; missing
    projects fall back to the default projects.
    """
    payload = payload or {}
    target = coerce_decimal(payload.get("missionTarget"))
    if target == 0:
        target = DEFAULT_MISSION_TARGET
    raw_projects = payload.get("missionProjects")
    if raw_projects is None:
        projects = default_mission_projects()
    else:
        projects = [project_from_json(item) for item in raw_projects]
    return target, projects


def app_data_from_json(payload: Payload) -> AppData:
    """Parse a cached snapshot.

    Raises:
        KeyError, TypeError, ValueError: If the payload is malformed.
    """
    target, projects = mission_settings_from_json(payload)
    return AppData(
        users=[user_from_json(item) for item in payload.get("users", [])],
        accounts=[account_from_json(item) for item in payload.get("accounts", [])],
        transactions=[
            transaction_from_json(item)
            for item in payload.get("transactions", [])
        ],
        bills=[bill_from_json(item) for item in payload.get("bills", [])],
        closings=[closing_from_json(item) for item in payload.get("closings", [])],
        mission_target=target,
        mission_projects=projects,
        mission_campaigns=[
            campaign_from_json(item)
            for item in payload.get("missionCampaigns", [])
        ],
        mission_incomes=[
            income_from_json(item) for item in payload.get("missionIncomes", [])
        ],
        is_configured=bool(payload.get("isConfigured", False)),
    )


def app_data_to_json(data: AppData) -> Payload:
    """Serialize a snapshot for the cache; passwords are never written."""
    return {
        "users": [user_to_json(user) for user in data.users],
        "accounts": [
            account_to_json(account, for_api=False) for account in data.accounts
        ],
        "transactions": [
            transaction_to_json(transaction, for_api=False)
            for transaction in data.transactions
        ],
        "bills": [bill_to_json(bill, for_api=False) for bill in data.bills],
        "closings": [closing_to_json(closing) for closing in data.closings],
        "missionTarget": str(data.mission_target),
        "missionProjects": [
            project_to_json(project, for_api=False)
            for project in data.mission_projects
        ],
        "missionCampaigns": [
            campaign_to_json(campaign, for_api=False)
            for campaign in data.mission_campaigns
        ],
        "missionIncomes": [
            income_to_json(income, for_api=False)
            for income in data.mission_incomes
        ],
        "isConfigured": data.is_configured,
    }


__all__ = [
    "account_from_json",
    "account_to_json",
    "transaction_from_json",
    "transaction_to_json",
    "bill_from_json",
    "bill_to_json",
    "campaign_from_json",
    "campaign_to_json",
    "income_from_json",
    "income_to_json",
    "project_from_json",
    "project_to_json",
    "closing_from_json",
    "closing_to_json",
    "user_from_json",
    "user_to_json",
    "mission_settings_from_json",
    "app_data_from_json",
    "app_data_to_json",
]
