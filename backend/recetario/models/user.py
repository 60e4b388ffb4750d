# User 도메인 모델 (Beanie Document)
# - 이메일, 비밀번호(평문 그대로 저장), 사용자명, 아바타, 생성일
# - 이메일/사용자명은 unique 인덱스 (서비스 레이어의 중복 체크 뒤에 두는 최후 방어선)

from typing import Optional
from beanie import Document, Indexed
from pydantic import Field

class User(Document):
    email: Indexed(str, unique=True)
    password: str = Field(repr=False)
    username: Indexed(str, unique=True)
    avatar: Optional[str] = None
    createdAt: str

    class Settings:
        name = "users"  # 컬렉션명

    def to_public(self) -> dict:
        # 주니어 개발자님께: 원본 API와의 호환을 위해 비밀번호까지 그대로 내려줍니다.
        return {"id": str(self.id), **self.model_dump(exclude={"id", "revision_id"})}
