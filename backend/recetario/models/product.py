# Product 모델 (메모리 저장, 재시작 시 초기화)

from pydantic import BaseModel

class Product(BaseModel):
    id: int
    nombre: str
    precio: float
