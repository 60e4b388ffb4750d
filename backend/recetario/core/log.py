# 로깅 설정
# 주니어 개발자님께: 각 모듈은 logging.getLogger(__name__)으로 로거를 만들고,
# 레벨/포맷은 앱 시작 시 여기서 한 번만 정합니다.

import logging

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = None) -> None:
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
