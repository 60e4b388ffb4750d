# MongoDB 연결 및 배치 쓰기
# - motor 클라이언트 생성 + Beanie ODM 초기화 (앱 시작 시 1회)
# - WriteBatch: 여러 쓰기를 모아서 한 번에 커밋 (트랜잭션 사용 여부는 설정으로 결정)

import functools
import logging
from typing import List, Optional, Tuple

from beanie import PydanticObjectId, init_beanie
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .config import settings
from .exceptions import UnexpectedStoreError
from .retry import create_connect_retry_decorator
from ..models.recipe import Recipe
from ..models.user import User

logger = logging.getLogger(__name__)

DOCUMENT_MODELS = [User, Recipe]

_client = None
_owns_client = False


def parse_object_id(value: str) -> Optional[PydanticObjectId]:
    """경로 파라미터 문자열을 ObjectId로 변환합니다. 형식이 틀리면 None."""
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        return None


async def _ping(client) -> None:
    await client.admin.command("ping")


async def init_database(client=None) -> None:
    """
    DB 클라이언트를 준비하고 Beanie를 초기화합니다.

    주니어 개발자님께: 테스트에서는 mongomock_motor의 AsyncMongoMockClient를
    client 인자로 넘깁니다. 이 경우 ping(연결 확인)은 건너뜁니다.
    """
    global _client, _owns_client
    owns = client is None
    if owns:
        client = AsyncIOMotorClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
        )
        ping = create_connect_retry_decorator(max_attempts=settings.MONGODB_CONNECT_ATTEMPTS)(_ping)
        await ping(client)

    database = client[settings.MONGODB_DATABASE]
    await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    _client = client
    _owns_client = owns
    logger.info(f"[db] MongoDB 초기화 완료: database={settings.MONGODB_DATABASE}")


def close_database() -> None:
    global _client, _owns_client
    if _client is not None and _owns_client:
        _client.close()
    _client = None
    _owns_client = False


def get_client():
    if _client is None:
        raise RuntimeError("MongoDB client is not initialized. Call init_database() on startup.")
    return _client


class WriteBatch:
    """
    여러 문서 쓰기를 모아 두었다가 commit()에서 한 번에 적용합니다.

    - update(): dotted path를 포함한 부분 수정 ($set)
    - delete(): id로 문서 삭제

    MONGODB_USE_TRANSACTIONS=True이면 모든 쓰기가 하나의 트랜잭션으로 커밋되어
    읽는 쪽에서는 전부 적용되었거나 하나도 적용되지 않은 상태만 보입니다.
    False이면 순서대로 적용만 하므로 중간에 실패하면 앞선 쓰기는 남습니다 (단독 mongod, 테스트 환경).
    """

    def __init__(self, client=None, use_transaction: Optional[bool] = None):
        self._client = client
        self._use_transaction = settings.MONGODB_USE_TRANSACTIONS if use_transaction is None else use_transaction
        self._ops: List[Tuple[str, type, PydanticObjectId, dict]] = []

    def __len__(self) -> int:
        return len(self._ops)

    def update(self, model, doc_id: PydanticObjectId, fields: dict) -> "WriteBatch":
        self._ops.append(("update", model, doc_id, dict(fields)))
        return self

    def delete(self, model, doc_id: PydanticObjectId) -> "WriteBatch":
        self._ops.append(("delete", model, doc_id, {}))
        return self

    async def commit(self) -> None:
        if not self._ops:
            return
        try:
            if self._use_transaction:
                client = self._client or get_client()
                async with await client.start_session() as session:
                    async with session.start_transaction():
                        await self._apply(session)
            else:
                await self._apply(None)
        except PyMongoError as e:
            raise UnexpectedStoreError(str(e), operation="batch commit") from e
        logger.info(f"[db] batch commit 완료: {len(self._ops)}건 (transaction={self._use_transaction})")

    async def _apply(self, session) -> None:
        # mongomock은 session 인자를 지원하지 않으므로 트랜잭션이 없을 때는 넘기지 않습니다.
        extra = {"session": session} if session is not None else {}
        for kind, model, doc_id, fields in self._ops:
            collection = model.get_motor_collection()
            if kind == "update":
                await collection.update_one({"_id": doc_id}, {"$set": fields}, **extra)
            else:
                await collection.delete_one({"_id": doc_id}, **extra)


def store_errors(operation: str):
    """저장소 예외(PyMongoError)를 UnexpectedStoreError로 바꿔 주는 데코레이터"""
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except PyMongoError as e:
                raise UnexpectedStoreError(str(e), operation=operation) from e
        return wrapper
    return decorator
