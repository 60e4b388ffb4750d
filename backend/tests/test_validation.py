# 스키마/에러 포맷/재시도 유닛 테스트
import asyncio

from pymongo.errors import ConnectionFailure

from recetario.core.handlers import format_validation_errors
from recetario.core.retry import create_connect_retry_decorator
from recetario.schemas.recipe_schema import RecipeUpdate
from recetario.services.recipe_service import author_snapshot_updates

def test_recipe_update_flattens_autor_to_dotted_paths():
    payload = RecipeUpdate(titulo="Nuevo", autor={"avatar": "https://img.example.com/a.png"}, imagen=None)
    assert payload.to_update_fields() == {"titulo": "Nuevo", "autor.avatar": "https://img.example.com/a.png"}

def test_recipe_update_keeps_url_as_sent():
    payload = RecipeUpdate(imagen="https://img.example.com")
    assert payload.to_update_fields() == {"imagen": "https://img.example.com"}

def test_author_snapshot_updates():
    assert author_snapshot_updates("ana2", None) == {"autor.nombre": "ana2"}
    assert author_snapshot_updates(None, "https://a.example.com/x.png") == {"autor.avatar": "https://a.example.com/x.png"}
    assert author_snapshot_updates() == {}

def test_format_validation_errors_paths():
    errors = [
        {"loc": ("body", "ingredientes", 0, "nombre"), "msg": "String should have at least 1 character"},
        {"loc": ("body", "imagen"), "msg": "Value error, La imagen debe ser una URL válida."},
        {"loc": ("body",), "msg": "Field required"},
    ]
    assert format_validation_errors(errors) == [
        {"field": "ingredientes[0].nombre", "message": "String should have at least 1 character"},
        {"field": "imagen", "message": "La imagen debe ser una URL válida."},
        {"field": "body", "message": "Field required"},
    ]

def test_connect_retry_recovers_after_transient_failure():
    calls = []

    @create_connect_retry_decorator(max_attempts=3, initial_wait=0, max_wait=0)
    async def ping():
        calls.append(1)
        if len(calls) < 2:
            raise ConnectionFailure("not yet")
        return "pong"

    assert asyncio.run(ping()) == "pong"
    assert len(calls) == 2
