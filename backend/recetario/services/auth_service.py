# 인증/사용자 서비스 레이어
# - 회원가입 (이메일/사용자명 중복 체크)
# - 로그인 (평문 비교, 토큰 없음)
# - 사용자 목록/삭제 (작성한 레시피도 함께 삭제)
# - 프로필 수정 + 레시피 autor 스냅샷 전파

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends

from ..core.database import WriteBatch
from ..core.exceptions import AuthError, ConflictError, NotFoundError
from ..models.user import User
from ..repositories.user_repository import UserRepository
from .recipe_service import RecipeService, get_recipe_service

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    # 2024-05-01T12:00:00.000Z 형식
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AuthService:
    def __init__(self, repo: UserRepository, recipes: RecipeService):
        self.repo = repo
        self.recipes = recipes

    async def is_username_taken(self, username: str, exclude_user_id: Optional[str] = None) -> bool:
        users = await self.repo.find_by_username(username)
        return any(str(u.id) != exclude_user_id for u in users)

    async def register(self, email: str, password: str, username: str, avatar: Optional[str] = None) -> User:
        if await self.repo.get_by_email(email):
            raise ConflictError("El email ya está registrado.")
        if await self.is_username_taken(username):
            raise ConflictError("El nombre de usuario ya está en uso.")
        user = await self.repo.create(
            email=email,
            password=password,
            username=username,
            avatar=avatar or None,
            created_at=_utc_now_iso(),
        )
        logger.info(f"[auth] 회원가입: id={user.id}, username={username}")
        return user

    async def login(self, email: str, password: str) -> User:
        user = await self.repo.get_by_credentials(email, password)
        if user is None:
            raise AuthError("Credenciales inválidas")
        return user

    async def list_users(self) -> List[User]:
        return await self.repo.list_all()

    async def delete_user(self, user_id: str) -> dict:
        """
        사용자와 그 사용자가 작성한 레시피(autor.nombre == username)를 한 배치로 삭제합니다.
        존재하지 않는 id는 아무 것도 하지 않고 성공으로 처리합니다.
        """
        user = await self.repo.get(user_id)
        if user is not None:
            batch = WriteBatch()
            batch.delete(User, user.id)
            count = await self.recipes.stage_author_delete(batch, user.username)
            await batch.commit()
            logger.info(f"[auth] 사용자 삭제: id={user_id}, 레시피 {count}건 함께 삭제")
        return {"message": "Usuario y sus recetas eliminados"}

    async def update_profile(self, user_id: str, username: Optional[str] = None, avatar: Optional[str] = None) -> dict:
        """
        프로필을 부분 수정하고, 변경 전 사용자명으로 작성된 레시피의 autor 스냅샷을 함께 갱신합니다.

        흐름: 사용자 조회 → 사용자명 중복 체크(본인 제외) → 변경 필드 구성 (없으면 종료)
        → 영향받는 레시피 조회 → 배치 구성 → commit.
        배치 commit이 실패하면 예외가 그대로 전파되고 보상 처리나 재시도는 하지 않습니다.
        """
        user = await self.repo.get(user_id)
        if user is None:
            raise NotFoundError("Usuario no encontrado")

        old_username = user.username
        if username and username != old_username:
            if await self.is_username_taken(username, exclude_user_id=str(user.id)):
                raise ConflictError("El nombre de usuario ya está ocupado.")

        updates = {}
        if username:
            updates["username"] = username
        if avatar:
            updates["avatar"] = avatar

        if not updates:
            return {"message": "Nada que actualizar"}

        batch = WriteBatch()
        batch.update(User, user.id, updates)
        count = await self.recipes.stage_author_sync(batch, old_username, username=username, avatar=avatar)
        await batch.commit()
        logger.info(f"[auth] 프로필 수정: id={user_id}, fields={list(updates)}, 레시피 {count}건 반영")

        return {"message": "Perfil y recetas actualizados correctamente", "id": user_id, **updates}


def get_auth_service(
    repo: UserRepository = Depends(UserRepository),
    recipes: RecipeService = Depends(get_recipe_service),
) -> AuthService:
    return AuthService(repo, recipes)
