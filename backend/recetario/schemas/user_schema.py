# 요청 스키마 정의 (Pydantic 모델)

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from .fields import check_email, check_url

class RegisterRequest(BaseModel):
    email: str
    password: str = Field(..., min_length=6)
    username: str = Field(..., min_length=1)
    avatar: Optional[str] = None

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v):
        return check_email(v, "Debe ser un email válido.")

class LoginRequest(BaseModel):
    email: str
    password: str

class UpdateProfileRequest(BaseModel):
    username: Optional[str] = Field(None, min_length=1)
    avatar: Optional[str] = None

    @field_validator("avatar")
    @classmethod
    def avatar_must_be_url(cls, v):
        return check_url(v, "El avatar debe ser una URL válida.")
