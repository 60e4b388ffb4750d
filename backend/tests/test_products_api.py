# 상품 API 테스트 (메모리 저장소)

from recetario.repositories.product_repository import ProductStore

def test_root_banner(products_client):
    resp = products_client.get("/")
    assert resp.status_code == 200
    assert resp.text == "API de Productos v1.0"

def test_list_seeded_products(products_client):
    ids = [p["id"] for p in products_client.get("/productos").json()]
    assert ids == [1, 2, 3]

def test_create_assigns_next_id_and_coerces_price(products_client):
    resp = products_client.post("/productos", json={"id": 99, "nombre": "Monitor", "precio": "250.5"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 4, "nombre": "Monitor", "precio": 250.5}
    assert products_client.post("/productos", json={"nombre": "Cable", "precio": 5}).json()["id"] == 5

def test_create_rejects_non_numeric_price(products_client):
    resp = products_client.post("/productos", json={"nombre": "Monitor", "precio": "caro"})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "precio"

def test_get_product(products_client):
    assert products_client.get("/productos/2").json()["nombre"] == "Teclado Mecánico Keychron"
    assert products_client.get("/productos/42").status_code == 404
    resp = products_client.get("/productos/abc")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Producto no encontrado"}

def test_update_product(products_client):
    resp = products_client.put("/productos/1", json={"nombre": "Laptop", "precio": "1500"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "nombre": "Laptop", "precio": 1500.0}
    assert products_client.put("/productos/42", json={"nombre": "X", "precio": 1}).status_code == 404

def test_delete_product(products_client):
    resp = products_client.delete("/productos/3")
    assert resp.status_code == 204
    assert resp.content == b""
    assert [p["id"] for p in products_client.get("/productos").json()] == [1, 2]
    assert products_client.delete("/productos/3").status_code == 404

def test_ids_are_not_reused_after_delete(products_client):
    products_client.delete("/productos/3")
    assert products_client.post("/productos", json={"nombre": "Hub", "precio": 20}).json()["id"] == 4

def test_store_counter_starts_above_largest_seed():
    store = ProductStore([{"id": 7, "nombre": "A", "precio": 1.0}, {"id": 2, "nombre": "B", "precio": 2.0}])
    assert store.next_id == 8
    assert ProductStore([]).create("C", 3).id == 1
