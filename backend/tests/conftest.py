# 공용 테스트 픽스처
# - MongoDB 대신 mongomock_motor 메모리 클라이언트 사용
# - 상품 API는 테스트마다 새 ProductStore

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from recetario.core.config import settings
from recetario.main import create_app
from recetario.products_main import create_app as create_products_app
from recetario.repositories.product_repository import ProductStore


@pytest.fixture
def client(monkeypatch):
    # mongomock은 세션/트랜잭션을 지원하지 않으므로 테스트에서는 순차 적용 모드로 둡니다.
    monkeypatch.setattr(settings, "MONGODB_USE_TRANSACTIONS", False)
    app = create_app(mongo_client=AsyncMongoMockClient())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def products_client():
    with TestClient(create_products_app(ProductStore())) as c:
        yield c


@pytest.fixture
def register_user(client):
    def _register(username="ana", email=None, password="secreto1", avatar=None):
        body = {"email": email or f"{username}@example.com", "password": password, "username": username}
        if avatar is not None:
            body["avatar"] = avatar
        resp = client.post("/api/auth/register", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _register


@pytest.fixture
def recipe_payload():
    def _payload(nombre="ana", avatar=None, **overrides):
        autor = {"nombre": nombre}
        if avatar is not None:
            autor["avatar"] = avatar
        data = {
            "titulo": "Tortilla de patatas",
            "descripcion": "La clásica tortilla española",
            "categoria": "Principal",
            "dificultad": "Media",
            "tiempoPreparacion": "45 min",
            "autor": autor,
            "ingredientes": [{"nombre": "Huevos", "cantidad": "6"}, {"nombre": "Patatas", "cantidad": "500 g"}],
            "instrucciones": ["Pelar y cortar las patatas", "Freír", "Cuajar con el huevo"],
            "porciones": "4",
        }
        data.update(overrides)
        return data
    return _payload


@pytest.fixture
def create_recipe(client, recipe_payload):
    def _create(nombre="ana", avatar=None, **overrides):
        resp = client.post("/api/recipes", json=recipe_payload(nombre, avatar, **overrides))
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _create
