# 예외 → HTTP 응답 변환
# - 도메인 예외: {"error": "..."}
# - 요청 검증 실패: 400 {"errors": [{"field": ..., "message": ...}]}
# - 그 외 모든 예외: 500 {"error": str(exc)}

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import RecetarioError

logger = logging.getLogger(__name__)


def _field_path(loc) -> str:
    # ("body", "ingredientes", 0, "nombre") -> "ingredientes[0].nombre"
    path = ""
    for part in loc:
        if part == "body" and not path:
            continue
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or "body"


def _message(error: dict) -> str:
    msg = error.get("msg", "")
    # 주니어 개발자님께: field_validator에서 ValueError를 던지면 pydantic이
    # "Value error, " 접두어를 붙입니다. 클라이언트에는 원래 메시지만 보여줍니다.
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return msg


def format_validation_errors(errors) -> list:
    return [{"field": _field_path(e.get("loc", ())), "message": _message(e)} for e in errors]


async def recetario_error_handler(request: Request, exc: RecetarioError):
    if exc.status_code >= 500:
        logger.error(f"[store] {request.method} {request.url.path} 실패: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = format_validation_errors(exc.errors())
    logger.warning(f"[validation] {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"[unexpected] {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecetarioError, recetario_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
