# Recipe 도메인 모델 (Beanie Document)
# - autor는 User를 참조(Link)하지 않고 이름/아바타를 복사해 둔 스냅샷입니다.
#   사용자 프로필이 바뀌면 services/auth_service.py가 명시적으로 동기화합니다.

from typing import List, Literal, Optional
from beanie import Document
from pydantic import BaseModel

Dificultad = Literal["Fácil", "Media", "Difícil"]

class Autor(BaseModel):
    nombre: str
    avatar: Optional[str] = None

class Ingrediente(BaseModel):
    nombre: str
    cantidad: str

class Recipe(Document):
    titulo: str
    descripcion: str
    categoria: str
    dificultad: Dificultad
    tiempoPreparacion: str
    imagen: Optional[str] = None
    autor: Autor
    ingredientes: List[Ingrediente]
    instrucciones: List[str]
    porciones: str
    calificacion: Optional[float] = None

    class Settings:
        name = "recipes"

    def to_public(self) -> dict:
        return {"id": str(self.id), **self.model_dump(exclude={"id", "revision_id"}, exclude_none=True)}
