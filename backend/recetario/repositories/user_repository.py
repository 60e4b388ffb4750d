# 사용자 저장소 레이어
# - 데이터 접근(조회/생성)만 담당 (서비스 로직 분리)

from typing import List, Optional
from ..core.database import parse_object_id, store_errors
from ..models.user import User

class UserRepository:
    @store_errors("find user by email")
    async def get_by_email(self, email: str) -> Optional[User]:
        return await User.find_one(User.email == email)

    @store_errors("find users by username")
    async def find_by_username(self, username: str) -> List[User]:
        return await User.find(User.username == username).to_list()

    @store_errors("find user by credentials")
    async def get_by_credentials(self, email: str, password: str) -> Optional[User]:
        # 평문 비교 (해싱 없음)
        return await User.find_one(User.email == email, User.password == password)

    @store_errors("create user")
    async def create(self, email: str, password: str, username: str, avatar: Optional[str], created_at: str) -> User:
        user = User(email=email, password=password, username=username, avatar=avatar, createdAt=created_at)
        return await user.insert()

    @store_errors("get user")
    async def get(self, user_id: str) -> Optional[User]:
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await User.get(oid)

    @store_errors("list users")
    async def list_all(self) -> List[User]:
        return await User.find_all().to_list()
