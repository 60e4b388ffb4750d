# 상품 서비스 레이어 (메모리 저장소)

from fastapi import Request

from ..core.exceptions import NotFoundError
from ..models.product import Product
from ..repositories.product_repository import ProductStore

NOT_FOUND_MESSAGE = "Producto no encontrado"


def parse_product_id(raw: str) -> int:
    # 숫자가 아닌 id는 존재하지 않는 상품과 동일하게 404
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise NotFoundError(NOT_FOUND_MESSAGE)


class ProductService:
    def __init__(self, store: ProductStore):
        self.store = store

    def list_products(self):
        return self.store.list_all()

    def get_product(self, raw_id: str) -> Product:
        product = self.store.get(parse_product_id(raw_id))
        if product is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return product

    def create_product(self, nombre: str, precio: float) -> Product:
        return self.store.create(nombre, precio)

    def update_product(self, raw_id: str, nombre: str, precio: float) -> Product:
        product = self.store.update(parse_product_id(raw_id), nombre, precio)
        if product is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return product

    def delete_product(self, raw_id: str) -> None:
        if not self.store.delete(parse_product_id(raw_id)):
            raise NotFoundError(NOT_FOUND_MESSAGE)


def get_product_service(request: Request) -> ProductService:
    return ProductService(request.app.state.product_store)
