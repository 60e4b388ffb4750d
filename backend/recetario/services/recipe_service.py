# 레시피 서비스 레이어
# - 레시피 CRUD
# - autor 스냅샷 동기화: 사용자 프로필 변경/삭제 시 같은 WriteBatch에 레시피 쓰기를 추가

import logging
from typing import List, Optional

from fastapi import Depends

from ..core.database import WriteBatch
from ..core.exceptions import BadRequestError, NotFoundError
from ..models.recipe import Recipe
from ..repositories.recipe_repository import RecipeRepository
from ..schemas.recipe_schema import RecipeCreate, RecipeUpdate

logger = logging.getLogger(__name__)


def author_snapshot_updates(username: Optional[str] = None, avatar: Optional[str] = None) -> dict:
    """프로필 변경값을 레시피 autor 스냅샷의 dotted path 수정으로 변환합니다."""
    fields = {}
    if username:
        fields["autor.nombre"] = username
    if avatar:
        fields["autor.avatar"] = avatar
    return fields


class RecipeService:
    def __init__(self, repo: RecipeRepository):
        self.repo = repo

    async def list_recipes(self) -> List[Recipe]:
        return await self.repo.list_all()

    async def get_recipe(self, recipe_id: str) -> Recipe:
        recipe = await self.repo.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Receta no encontrada")
        return recipe

    async def create_recipe(self, payload: RecipeCreate) -> Recipe:
        return await self.repo.create(payload.model_dump())

    async def update_recipe(self, recipe_id: str, payload: RecipeUpdate) -> dict:
        fields = payload.to_update_fields()
        if not fields:
            raise BadRequestError("Se requiere al menos un campo para actualizar.")
        await self.repo.update(recipe_id, fields)
        return {
            "message": "Receta actualizada correctamente",
            "id": recipe_id,
            **payload.model_dump(exclude_unset=True, exclude_none=True),
        }

    async def delete_recipe(self, recipe_id: str) -> dict:
        await self.repo.delete(recipe_id)
        return {"message": "Receta eliminada"}

    # ---- autor 스냅샷 동기화 (User Directory에서 호출) ----

    async def stage_author_sync(
        self,
        batch: WriteBatch,
        old_nombre: str,
        username: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> int:
        """
        autor.nombre가 old_nombre인 모든 레시피에 스냅샷 수정을 batch에 추가합니다.

        주니어 개발자님께: 반드시 변경 전 사용자명으로 조회해야 합니다.
        commit은 호출한 쪽에서 사용자 문서 수정과 함께 한 번에 합니다.
        반환값은 batch에 추가된 레시피 수입니다.
        """
        fields = author_snapshot_updates(username, avatar)
        if not fields:
            return 0
        recipes = await self.repo.find_by_author_name(old_nombre)
        for recipe in recipes:
            batch.update(Recipe, recipe.id, fields)
        logger.info(f"[recipes] autor 스냅샷 동기화 예약: nombre={old_nombre}, {len(recipes)}건")
        return len(recipes)

    async def stage_author_delete(self, batch: WriteBatch, nombre: str) -> int:
        """autor.nombre가 nombre인 모든 레시피 삭제를 batch에 추가합니다."""
        recipes = await self.repo.find_by_author_name(nombre)
        for recipe in recipes:
            batch.delete(Recipe, recipe.id)
        return len(recipes)


def get_recipe_service(repo: RecipeRepository = Depends(RecipeRepository)) -> RecipeService:
    return RecipeService(repo)
