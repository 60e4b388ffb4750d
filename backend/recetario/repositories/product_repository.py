# 상품 저장소 (메모리)
# 주니어 개발자님께: 전역 리스트 대신 ProductStore 인스턴스를 앱 상태(app.state)에 두고
# 의존성 주입으로 꺼내 씁니다. 테스트마다 새 인스턴스를 만들 수 있어 서로 간섭하지 않습니다.
# 메서드 안에서 await가 없으므로 asyncio 환경에서 각 변경은 중간에 끊기지 않습니다.

from typing import Iterable, List, Optional

from ..models.product import Product

SEED_PRODUCTS = [
    {"id": 1, "nombre": "Laptop Dell XPS 15", "precio": 1899.99},
    {"id": 2, "nombre": "Teclado Mecánico Keychron", "precio": 150.00},
    {"id": 3, "nombre": "Mouse Logitech MX Master 3", "precio": 99.50},
]

class ProductStore:
    def __init__(self, products: Optional[Iterable[dict]] = None):
        seed = SEED_PRODUCTS if products is None else products
        self._products: List[Product] = [Product(**p) for p in seed]
        self._next_id = max((p.id for p in self._products), default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def list_all(self) -> List[Product]:
        return list(self._products)

    def get(self, product_id: int) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def create(self, nombre: str, precio: float) -> Product:
        product = Product(id=self._next_id, nombre=nombre, precio=float(precio))
        self._next_id += 1
        self._products.append(product)
        return product

    def update(self, product_id: int, nombre: str, precio: float) -> Optional[Product]:
        product = self.get(product_id)
        if product is None:
            return None
        product.nombre = nombre
        product.precio = float(precio)
        return product

    def delete(self, product_id: int) -> bool:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                del self._products[index]
                return True
        return False
