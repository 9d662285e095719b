"""Tests for bill creation, deletion and payment."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from src.application.use_cases.manage_bills import CreateBillUseCase, DeleteBillUseCase
from src.application.use_cases.pay_bill import PayBillUseCase
from src.domain.errors import RemoteApiError, ValidationError
from src.domain.models import AppData, BillStatus, TransactionType


def test_create_bill_forces_pending(offline_api, make_store, make_bill, fake_logger):
    """New bills always start as pending."""
    store = make_store()

    created = CreateBillUseCase(offline_api, store, logger=fake_logger).execute(
        make_bill(status=BillStatus.PAID)
    )

    assert created.status == BillStatus.PENDING
    assert store.snapshot.bills == [created]


def test_delete_bill(offline_api, make_store, make_bill, fake_logger):
    """Bills are removed after the remote delete."""
    store = make_store(AppData(bills=[make_bill()]))

    DeleteBillUseCase(offline_api, store, logger=fake_logger).execute("bill-1")

    assert store.snapshot.bills == []


def test_pay_bill_records_expense_and_marks_paid(offline_api, make_store, make_bill, make_account, fake_logger):
    """Paying creates an expense on the first account and marks the bill."""
    store = make_store(
        AppData(
            accounts=[make_account("first"), make_account("second")],
            bills=[make_bill(value="90")],
        )
    )
    today = date(2024, 3, 5)

    payment = PayBillUseCase(offline_api, store, logger=fake_logger).execute(
        "bill-1",
        today=today,
    )

    assert payment.transaction.type == TransactionType.EXPENSE
    assert payment.transaction.account_id == "first"
    assert payment.transaction.value == Decimal("90")
    assert payment.bill.status == BillStatus.PAID
    assert store.snapshot.bills[0].status == BillStatus.PAID
    assert store.snapshot.bills[0].last_payment_date == today
    assert [t.id for t in store.snapshot.transactions] == ["tx-new"]


def test_pay_bill_compensates_when_bill_update_fails(offline_api, make_store, make_bill, make_account, fake_logger):
    """A failed bill update deletes the payment and leaves the snapshot alone."""
    initial = AppData(accounts=[make_account()], bills=[make_bill()])
    store = make_store(initial)
    offline_api.update_bill.side_effect = RemoteApiError("boom", status_code=500)

    with pytest.raises(RemoteApiError):
        PayBillUseCase(offline_api, store, logger=fake_logger).execute("bill-1")

    offline_api.delete_transaction.assert_called_once_with("tx-new")
    assert store.snapshot is initial


def test_pay_bill_without_accounts(offline_api, make_store, make_bill, fake_logger):
    """Payment needs at least one account."""
    store = make_store(AppData(bills=[make_bill()]))

    with pytest.raises(ValidationError):
        PayBillUseCase(offline_api, store, logger=fake_logger).execute("bill-1")

    offline_api.create_transaction.assert_not_called()


def test_pay_paid_bill_is_rejected(offline_api, make_store, make_bill, make_account, fake_logger):
    """Paying a paid bill twice is rejected."""
    store = make_store(
        AppData(
            accounts=[make_account()],
            bills=[replace(make_bill(), status=BillStatus.PAID)],
        )
    )

    with pytest.raises(ValidationError):
        PayBillUseCase(offline_api, store, logger=fake_logger).execute("bill-1")
