# 레시피 요청 스키마
# - 생성: 모든 필수 필드 검사 (엄격)
# - 수정: 필드가 있을 때만 타입/형식 검사 (전부 선택)

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .fields import NonEmptyStr, check_url
from ..models.recipe import Dificultad

class AutorIn(BaseModel):
    nombre: NonEmptyStr
    avatar: Optional[str] = None

class IngredienteIn(BaseModel):
    nombre: NonEmptyStr
    cantidad: NonEmptyStr

class RecipeCreate(BaseModel):
    """클라이언트가 보낸 id 등 정의되지 않은 필드는 무시됩니다."""
    titulo: NonEmptyStr
    descripcion: NonEmptyStr
    categoria: NonEmptyStr
    dificultad: Dificultad
    tiempoPreparacion: NonEmptyStr
    imagen: Optional[str] = None
    autor: AutorIn
    ingredientes: List[IngredienteIn] = Field(..., min_length=1)
    instrucciones: List[NonEmptyStr] = Field(..., min_length=1)
    porciones: NonEmptyStr
    calificacion: Optional[float] = Field(None, ge=0, le=5)


class AutorPatch(BaseModel):
    nombre: Optional[str] = None
    avatar: Optional[str] = None

    @field_validator("avatar")
    @classmethod
    def avatar_must_be_url(cls, v):
        return check_url(v, "El avatar debe ser una URL válida.")

class RecipeUpdate(BaseModel):
    titulo: Optional[str] = None
    descripcion: Optional[str] = None
    categoria: Optional[str] = None
    dificultad: Optional[Dificultad] = None
    tiempoPreparacion: Optional[str] = None
    imagen: Optional[str] = None
    autor: Optional[AutorPatch] = None
    ingredientes: Optional[List[IngredienteIn]] = None
    instrucciones: Optional[List[str]] = None
    porciones: Optional[str] = None
    calificacion: Optional[float] = Field(None, ge=0, le=5)

    @field_validator("imagen")
    @classmethod
    def imagen_must_be_url(cls, v):
        return check_url(v, "La imagen debe ser una URL válida.")

    def to_update_fields(self) -> dict:
        """
        저장소에 넘길 $set 필드를 만듭니다.

        autor는 통째로 덮어쓰지 않고 보내온 하위 필드만 "autor.nombre" 같은
        dotted path로 펼칩니다. null 값은 무시합니다.
        """
        data = self.model_dump(exclude_unset=True, exclude_none=True)
        autor = data.pop("autor", None) or {}
        for key, value in autor.items():
            data[f"autor.{key}"] = value
        return data
