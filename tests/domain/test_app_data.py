"""Tests for the AppData aggregate and account rules."""

from decimal import Decimal

import pytest

from src.domain.constants import DEFAULT_MISSION_TARGET
from src.domain.errors import ValidationError
from src.domain.models import AppData
from src.domain.policies import (
    account_in_use,
    can_delete_account,
    select_payment_account,
)


def test_defaults_use_mission_settings():
    """An empty snapshot carries the default mission settings."""
    data = AppData()

    assert data.mission_target == DEFAULT_MISSION_TARGET
    assert [p.name for p in data.mission_projects] == [
        "EBF",
        "Missões Mundiais",
        "Ação Social Local",
    ]
    assert data.is_configured is False


def test_with_methods_return_new_snapshots(make_tx, make_account):
    """Reducers never mutate the original snapshot."""
    original = AppData(accounts=[make_account()])

    updated = original.with_transaction_added(make_tx())

    assert original.transactions == []
    assert len(updated.transactions) == 1
    assert updated.with_transaction_removed("tx-1").transactions == []


def test_replacing_account_keeps_position(make_account):
    """Replacing an account keeps it in place."""
    data = AppData(accounts=[make_account("a"), make_account("b")])

    updated = data.with_account_replaced(make_account("a", "99"))

    assert [a.id for a in updated.accounts] == ["a", "b"]
    assert updated.accounts[0].initial_balance == Decimal("99")


def test_session_user_marks_snapshot_configured(make_user):
    """Logging in replaces the users list with the session user."""
    data = AppData(users=[make_user("x"), make_user("y")])

    updated = data.with_session_user(make_user("me"))

    assert [u.id for u in updated.users] == ["me"]
    assert updated.is_configured is True


def test_account_in_use_checks_both_legs(make_tx):
    """An account referenced as a transfer destination is in use."""
    txs = [make_tx(account_id="a", to_account_id="b")]

    assert account_in_use("a", txs)
    assert account_in_use("b", txs)
    assert can_delete_account("c", txs)


def test_payment_account_is_first(make_account):
    """The first account pays; an empty list is rejected."""
    accounts = [make_account("first"), make_account("second")]

    assert select_payment_account(accounts).id == "first"
    with pytest.raises(ValidationError):
        select_payment_account([])
