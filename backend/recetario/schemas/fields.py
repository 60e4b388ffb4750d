# 스키마 공용 필드/검증 함수

from typing import Annotated, Optional

from pydantic import EmailStr, Field, HttpUrl, TypeAdapter, ValidationError

NonEmptyStr = Annotated[str, Field(min_length=1)]

_url_adapter = TypeAdapter(HttpUrl)
_email_adapter = TypeAdapter(EmailStr)


def check_url(value: Optional[str], message: str) -> Optional[str]:
    # HttpUrl로 형식만 검사하고, 저장은 사용자가 보낸 문자열 그대로 합니다 (정규화 X)
    if value is None:
        return value
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(message)
    return value


def check_email(value: str, message: str) -> str:
    # EmailStr은 도메인을 소문자로 정규화합니다. 로그인/중복 체크가 정확히 일치 비교이므로
    # 형식만 검사하고 보낸 문자열 그대로 돌려줍니다.
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        raise ValueError(message)
    return value
