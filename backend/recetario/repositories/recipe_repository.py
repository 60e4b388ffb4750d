# 레시피 저장소 레이어

from typing import List, Optional
from ..core.database import parse_object_id, store_errors
from ..core.exceptions import UnexpectedStoreError
from ..models.recipe import Recipe

class RecipeRepository:
    @store_errors("list recipes")
    async def list_all(self) -> List[Recipe]:
        return await Recipe.find_all().to_list()

    @store_errors("get recipe")
    async def get(self, recipe_id: str) -> Optional[Recipe]:
        oid = parse_object_id(recipe_id)
        if oid is None:
            return None
        return await Recipe.get(oid)

    @store_errors("find recipes by author")
    async def find_by_author_name(self, nombre: str) -> List[Recipe]:
        return await Recipe.find({"autor.nombre": nombre}).to_list()

    @store_errors("create recipe")
    async def create(self, data: dict) -> Recipe:
        return await Recipe(**data).insert()

    @store_errors("update recipe")
    async def update(self, recipe_id: str, fields: dict) -> None:
        # 존재 여부를 미리 확인하지 않습니다. 매칭된 문서가 없으면 저장소 에러로 취급합니다.
        oid = parse_object_id(recipe_id)
        result = None
        if oid is not None:
            result = await Recipe.get_motor_collection().update_one({"_id": oid}, {"$set": fields})
        if result is None or result.matched_count == 0:
            raise UnexpectedStoreError(f"No document to update: recipes/{recipe_id}", operation="update recipe")

    @store_errors("delete recipe")
    async def delete(self, recipe_id: str) -> None:
        oid = parse_object_id(recipe_id)
        if oid is None:
            return None
        await Recipe.get_motor_collection().delete_one({"_id": oid})
