# WriteBatch 유닛 테스트 (DB 의존성 없음, mock 사용)
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import OperationFailure

from recetario.core.config import Settings, settings
from recetario.core.database import WriteBatch
from recetario.core.exceptions import UnexpectedStoreError


def _fake_model():
    collection = MagicMock()
    collection.update_one = AsyncMock()
    collection.delete_one = AsyncMock()
    model = MagicMock()
    model.get_motor_collection.return_value = collection
    return model, collection


def test_commit_without_transaction_applies_in_order():
    model, collection = _fake_model()
    batch = WriteBatch(use_transaction=False)
    batch.update(model, "u1", {"autor.nombre": "ana2"}).delete(model, "r1")
    assert len(batch) == 2

    asyncio.run(batch.commit())
    collection.update_one.assert_awaited_once_with({"_id": "u1"}, {"$set": {"autor.nombre": "ana2"}})
    collection.delete_one.assert_awaited_once_with({"_id": "r1"})


def test_commit_with_transaction_passes_session():
    model, collection = _fake_model()
    session = MagicMock()
    session.__aenter__.return_value = session
    client = MagicMock()
    client.start_session = AsyncMock(return_value=session)

    batch = WriteBatch(client=client, use_transaction=True)
    batch.update(model, "u1", {"username": "ana2"})
    asyncio.run(batch.commit())

    session.start_transaction.assert_called_once()
    collection.update_one.assert_awaited_once_with({"_id": "u1"}, {"$set": {"username": "ana2"}}, session=session)


def test_empty_batch_does_not_touch_store():
    client = MagicMock()
    client.start_session = AsyncMock()
    asyncio.run(WriteBatch(client=client, use_transaction=True).commit())
    client.start_session.assert_not_awaited()


def test_store_failure_becomes_unexpected_store_error():
    model, collection = _fake_model()
    collection.delete_one.side_effect = OperationFailure("disk full")
    batch = WriteBatch(use_transaction=False).delete(model, "r1")
    with pytest.raises(UnexpectedStoreError) as exc:
        asyncio.run(batch.commit())
    assert "disk full" in exc.value.message
    assert exc.value.operation == "batch commit"


def test_transactions_are_enabled_by_default():
    assert Settings.model_fields["MONGODB_USE_TRANSACTIONS"].default is True


def test_batch_without_explicit_mode_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "MONGODB_USE_TRANSACTIONS", True)
    model, collection = _fake_model()
    collection.delete_one.side_effect = OperationFailure("write conflict")
    session = MagicMock()
    session.__aenter__.return_value = session
    client = MagicMock()
    client.start_session = AsyncMock(return_value=session)

    batch = WriteBatch(client=client)
    batch.update(model, "u1", {"username": "ana2"}).delete(model, "r1")
    with pytest.raises(UnexpectedStoreError):
        asyncio.run(batch.commit())

    # 두 쓰기 모두 같은 트랜잭션 세션 안에서 실행되어 실패 시 함께 롤백됩니다.
    session.start_transaction.assert_called_once()
    collection.update_one.assert_awaited_once_with({"_id": "u1"}, {"$set": {"username": "ana2"}}, session=session)
    collection.delete_one.assert_awaited_once_with({"_id": "r1"}, session=session)
