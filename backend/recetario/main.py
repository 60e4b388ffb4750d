# FastAPI 진입점 (레시피/사용자 API)
# - Beanie ODM 초기화 (MongoDB)
# - 라우터 라우팅 (/api/auth, /api/recipes)
# - 예외 핸들러 등록
# - CORS 설정

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core import database
from .core.config import settings
from .core.handlers import register_exception_handlers
from .core.log import configure_logging
from .api.auth import router as auth_router
from .api.recipes import router as recipes_router

logger = logging.getLogger(__name__)


def create_app(mongo_client=None) -> FastAPI:
    """
    앱 팩토리.

    주니어 개발자님께: mongo_client를 넘기면 그 클라이언트로 Beanie를 초기화합니다
    (테스트에서는 mongomock_motor 클라이언트). None이면 설정의 MONGODB_URI로 연결합니다.
    """

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            await database.init_database(mongo_client)
        except Exception as e:
            # MongoDB 연결 실패 시에도 서버는 시작됩니다. DB를 쓰는 요청은 500으로 실패합니다.
            logger.warning(f"[db] MongoDB 연결 실패: {e}")
            logger.info(f"[db] MongoDB URI를 확인하세요: {settings.MONGODB_URI}")
        try:
            yield
        finally:
            database.close_database()

    app = FastAPI(
        title="Recetario API",
        description="레시피 공유 API (회원가입/로그인, 프로필 변경 시 레시피 작성자 정보 전파)",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "app": settings.APP_NAME, "version": "1.0.0"}

    app.include_router(auth_router, prefix="/api")
    app.include_router(recipes_router, prefix="/api")
    return app


configure_logging()
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
