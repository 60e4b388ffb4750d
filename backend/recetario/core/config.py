# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from pydantic import Field

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/recetario/core/config.py에 있으므로,
# 4단계 상위로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "recetario"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # MongoDB 접속 정보 (계정 정보는 로컬 .env 파일에 둡니다)
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "recetario"
    # 트랜잭션은 replica set에서만 동작합니다. 단독 mongod에서는 False로 두면 배치가 순서대로만 적용됩니다 (원자성 X).
    MONGODB_USE_TRANSACTIONS: bool = Field(default=True, description="WriteBatch를 MongoDB 트랜잭션으로 커밋할지 여부")
    MONGODB_CONNECT_ATTEMPTS: int = 3
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    CORS_ALLOW_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def cors_origins(self) -> list:
        origins = [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

settings = Settings()
