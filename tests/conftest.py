"""Shared builders for treasury tests."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.state import AppStateStore
from src.domain.models import (
    AppData,
    BankAccount,
    Bill,
    BillStatus,
    CampaignStatus,
    MissionCampaign,
    MissionIncome,
    Transaction,
    TransactionType,
    User,
    UserRole,
)


def _account(
    account_id="acc-1",
    initial="0",
    name="Conta Principal",
    account_type="Conta Corrente",
    bank_name=None,
):
    return BankAccount(
        id=account_id,
        name=name,
        type=account_type,
        initial_balance=Decimal(initial),
        bank_name=bank_name,
    )


def _tx(
    tx_type=TransactionType.INCOME,
    value="100",
    day=date(2024, 3, 10),
    account_id="acc-1",
    to_account_id=None,
    category="Dízimos",
    description="Lançamento",
    tx_id="tx-1",
):
    return Transaction(
        id=tx_id,
        type=tx_type,
        value=Decimal(value),
        date=day,
        description=description,
        category=category,
        account_id=account_id,
        to_account_id=to_account_id,
    )


def _bill(
    bill_id="bill-1",
    value="150",
    due_date=10,
    status=BillStatus.PENDING,
    description="Conta de Luz",
    category="Luz",
):
    return Bill(
        id=bill_id,
        description=description,
        value=Decimal(value),
        due_date=due_date,
        category=category,
        is_recurring=True,
        status=status,
    )


def _campaign(
    campaign_id="camp-1",
    target="1000",
    status=CampaignStatus.ACTIVE,
    end_date=None,
    name="Missões 2024",
):
    return MissionCampaign(
        id=campaign_id,
        name=name,
        target=Decimal(target),
        start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        status=status,
        end_date=end_date,
    )


def _income(
    income_id="inc-1",
    campaign_id="camp-1",
    source="Ofertas",
    value="100",
):
    return MissionIncome(
        id=income_id,
        campaign_id=campaign_id,
        source=source,
        value=Decimal(value),
        date=date(2024, 3, 1),
    )


def _user(user_id="user-1", role=UserRole.ADMIN, username="admin", password=None):
    return User(
        id=user_id,
        name=username.title(),
        username=username,
        role=role,
        password=password,
    )


@pytest.fixture
def make_account():
    return _account


@pytest.fixture
def make_tx():
    return _tx


@pytest.fixture
def make_bill():
    return _bill


@pytest.fixture
def make_campaign():
    return _campaign


@pytest.fixture
def make_income():
    return _income


@pytest.fixture
def make_user():
    return _user


@pytest.fixture
def fake_logger():
    return MagicMock()


@pytest.fixture
def make_store(fake_logger):
    """Return a factory for cache-less state stores."""

    def _build(data=None):
        return AppStateStore(initial=data or AppData(), logger=fake_logger)

    return _build


@pytest.fixture
def offline_api():
    """MagicMock API whose writes echo ids and whose fetch always fails.

    The failing fetch keeps the post-mutation sync from replacing the
    locally patched snapshot.
    """
    from dataclasses import replace

    from src.domain.errors import RemoteApiError

    api = MagicMock()
    api.fetch_app_data.side_effect = RemoteApiError("offline")
    api.create_transaction.side_effect = lambda tx: replace(tx, id="tx-new")
    api.create_account.side_effect = lambda acc: replace(acc, id=acc.id or "acc-new")
    api.update_account.side_effect = lambda acc: acc
    api.create_bill.side_effect = lambda bill: replace(bill, id="bill-new")
    api.update_bill.side_effect = lambda bill: bill
    api.create_campaign.side_effect = lambda c: replace(c, id="camp-new")
    api.complete_campaign.side_effect = lambda c: c
    api.create_mission_income.side_effect = lambda i: replace(i, id="inc-new")
    api.create_user.side_effect = lambda u: replace(u, id="user-new", password=None)
    return api
