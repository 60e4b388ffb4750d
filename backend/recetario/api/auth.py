# 인증/사용자 라우터
# - 회원가입: POST /api/auth/register
# - 로그인: POST /api/auth/login
# - 사용자 목록: GET /api/auth/users
# - 사용자 삭제(레시피 포함): DELETE /api/auth/users/{user_id}
# - 프로필 수정(레시피 전파): PUT /api/auth/profile/{user_id}

from typing import Optional

from fastapi import APIRouter, Depends, status

from ..schemas.user_schema import LoginRequest, RegisterRequest, UpdateProfileRequest
from ..services.auth_service import AuthService, get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", status_code=status.HTTP_201_CREATED, summary="회원가입 (이메일/사용자명 중복 체크 포함)")
async def register(payload: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    user = await service.register(payload.email, payload.password, payload.username, payload.avatar)
    return user.to_public()

@router.post("/login", summary="로그인 (평문 비교)")
async def login(payload: LoginRequest, service: AuthService = Depends(get_auth_service)):
    user = await service.login(payload.email, payload.password)
    return user.to_public()

@router.get("/users", summary="사용자 전체 목록")
async def list_users(service: AuthService = Depends(get_auth_service)):
    return [u.to_public() for u in await service.list_users()]

@router.delete("/users/{user_id}", summary="사용자 및 작성 레시피 삭제")
async def delete_user(user_id: str, service: AuthService = Depends(get_auth_service)):
    return await service.delete_user(user_id)

@router.put("/profile/{user_id}", summary="프로필 수정 + 레시피 autor 스냅샷 전파")
async def update_profile(
    user_id: str,
    payload: Optional[UpdateProfileRequest] = None,
    service: AuthService = Depends(get_auth_service),
):
    payload = payload or UpdateProfileRequest()
    return await service.update_profile(user_id, username=payload.username, avatar=payload.avatar)
