# 상품 라우터 (/productos)
# 주니어 개발자님께: async def로 두어 이벤트 루프 한 곳에서만 ProductStore를 변경합니다 (스레드풀 X).

from fastapi import APIRouter, Depends, Response, status

from ..models.product import Product
from ..schemas.product_schema import ProductPayload
from ..services.product_service import ProductService, get_product_service

router = APIRouter(prefix="/productos", tags=["productos"])

@router.get("", response_model=list[Product], summary="상품 전체 목록")
async def list_products(service: ProductService = Depends(get_product_service)):
    return service.list_products()

@router.get("/{product_id}", response_model=Product, summary="상품 단건 조회")
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return service.get_product(product_id)

@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED, summary="상품 생성 (id는 서버가 부여)")
async def create_product(payload: ProductPayload, service: ProductService = Depends(get_product_service)):
    return service.create_product(payload.nombre, payload.precio)

@router.put("/{product_id}", response_model=Product, summary="상품 수정")
async def update_product(product_id: str, payload: ProductPayload, service: ProductService = Depends(get_product_service)):
    return service.update_product(product_id, payload.nombre, payload.precio)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response, summary="상품 삭제")
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    service.delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
