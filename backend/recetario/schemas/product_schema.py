# 상품 요청 스키마

from pydantic import BaseModel

class ProductPayload(BaseModel):
    # precio는 "250.5" 같은 문자열도 float으로 변환됩니다 (pydantic lax 모드)
    nombre: str
    precio: float
