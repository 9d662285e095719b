"""Tests for transaction creation and deletion."""

from dataclasses import replace

import pytest

from src.application.use_cases.record_transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
)
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models import AppData


def test_create_adds_remote_record(offline_api, make_store, make_account, make_tx, fake_logger):
    """The created transaction is appended with the id assigned remotely."""
    store = make_store(AppData(accounts=[make_account()]))
    use_case = CreateTransactionUseCase(offline_api, store, logger=fake_logger)

    created = use_case.execute(replace(make_tx(), id=""))

    assert created.id == "tx-new"
    assert [t.id for t in store.snapshot.transactions] == ["tx-new"]
    offline_api.fetch_app_data.assert_called_once()


def test_create_rejects_invalid_before_remote_call(offline_api, make_store, make_tx, fake_logger):
    """Validation runs before any remote call."""
    store = make_store(AppData())
    use_case = CreateTransactionUseCase(offline_api, store, logger=fake_logger)

    with pytest.raises(ValidationError):
        use_case.execute(make_tx())

    offline_api.create_transaction.assert_not_called()
    assert store.snapshot.transactions == []


def test_delete_removes_transaction(offline_api, make_store, make_tx, fake_logger):
    """Deleting removes the record locally after the remote delete."""
    store = make_store(AppData(transactions=[make_tx()]))

    DeleteTransactionUseCase(offline_api, store, logger=fake_logger).execute("tx-1")

    offline_api.delete_transaction.assert_called_once_with("tx-1")
    assert store.snapshot.transactions == []


def test_delete_unknown_transaction(offline_api, make_store, fake_logger):
    """Unknown ids raise NotFoundError without calling the API."""
    use_case = DeleteTransactionUseCase(offline_api, make_store(), logger=fake_logger)

    with pytest.raises(NotFoundError):
        use_case.execute("missing")

    offline_api.delete_transaction.assert_not_called()
