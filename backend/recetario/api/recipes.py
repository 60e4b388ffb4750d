# 레시피 라우터 (/api/recipes)

from typing import Optional

from fastapi import APIRouter, Depends, status

from ..schemas.recipe_schema import RecipeCreate, RecipeUpdate
from ..services.recipe_service import RecipeService, get_recipe_service

router = APIRouter(prefix="/recipes", tags=["recipes"])

@router.get("", summary="레시피 전체 목록")
async def list_recipes(service: RecipeService = Depends(get_recipe_service)):
    return [r.to_public() for r in await service.list_recipes()]

@router.get("/{recipe_id}", summary="레시피 단건 조회")
async def get_recipe(recipe_id: str, service: RecipeService = Depends(get_recipe_service)):
    recipe = await service.get_recipe(recipe_id)
    return recipe.to_public()

@router.post("", status_code=status.HTTP_201_CREATED, summary="레시피 생성")
async def create_recipe(payload: RecipeCreate, service: RecipeService = Depends(get_recipe_service)):
    recipe = await service.create_recipe(payload)
    return recipe.to_public()

@router.put("/{recipe_id}", summary="레시피 부분 수정")
async def update_recipe(
    recipe_id: str,
    payload: Optional[RecipeUpdate] = None,
    service: RecipeService = Depends(get_recipe_service),
):
    return await service.update_recipe(recipe_id, payload or RecipeUpdate())

@router.delete("/{recipe_id}", summary="레시피 삭제 (존재 여부 확인 없음)")
async def delete_recipe(recipe_id: str, service: RecipeService = Depends(get_recipe_service)):
    return await service.delete_recipe(recipe_id)
