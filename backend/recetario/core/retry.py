# 재시도 로직 유틸리티
# 주니어 개발자님께: 요청 처리 경로에서는 재시도하지 않습니다 (실패하면 바로 500).
# 재시도는 서버 시작 시 MongoDB 연결 확인(ping)에만 사용합니다.
# 컨테이너 환경에서는 DB가 API보다 늦게 뜨는 경우가 흔하기 때문입니다.

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
    after_log,
)
import logging
from typing import Type, Tuple

from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

logger = logging.getLogger(__name__)


def create_connect_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure, ServerSelectionTimeoutError)
):
    """
    DB 연결 확인용 재시도 데코레이터를 만드는 팩토리 함수입니다.

    - max_attempts: 총 시도 횟수 (처음 1번 포함)
    - initial_wait / max_wait: 지수 백오프 대기 시간 범위 (초)
    - exceptions: 재시도 대상 예외. 그 외 예외는 즉시 전파됩니다.

    마지막 시도까지 실패하면 원래 예외를 그대로 다시 던집니다 (reraise=True).
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=2,
            min=initial_wait,
            max=max_wait
        ),
        retry=retry_if_exception_type(exceptions),
        reraise=True,
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.ERROR)
    )
