# FastAPI 진입점 (상품 API, 메모리 저장)
# - ProductStore는 app.state에 보관 (전역 변수 X)

from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.config import settings
from .core.handlers import register_exception_handlers
from .core.log import configure_logging
from .api.products import router as products_router
from .repositories.product_repository import ProductStore


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    app = FastAPI(title="API de Productos", version="1.0.0")
    app.state.product_store = store or ProductStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "API de Productos v1.0"

    app.include_router(products_router)
    return app


configure_logging()
app = create_app()

if __name__ == "__main__":
    import uvicorn
    print(f"[INFO] 상품 API 시작: http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
