"""인증 라우터 — 회원가입, 로그인, 토큰 갱신, 로그아웃, 내 정보.

Auth Router — Registration, login, token refresh, logout and profile endpoints.
Each handler runs one workflow transaction and commits it on success.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from safebox.api.deps import get_current_user_id
from safebox.database import get_db
from safebox.schemas.auth import (
    AuthResult,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    UserResponse,
)
from safebox.schemas.common import ApiResponse, MessageResponse
from safebox.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=ApiResponse[AuthResult], status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[AuthResult]:
    """회원가입 — 사용자 생성 후 토큰 쌍 발급.

    Register a user and return the user with a fresh token pair.
    """
    result: AuthResult = await auth_service.register(db, data)
    await db.commit()
    return ApiResponse(data=result)


@router.post("/login", response_model=ApiResponse[AuthResult])
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[AuthResult]:
    """로그인 — 기존 세션을 모두 폐기하고 새 토큰 쌍 발급.

    Log in, revoking every previous session of the user.
    """
    result: AuthResult = await auth_service.login(db, data)
    await db.commit()
    return ApiResponse(data=result)


@router.post("/refresh", response_model=ApiResponse[AuthResult])
async def refresh_token(
    data: RefreshRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse[AuthResult]:
    """토큰 갱신 — 새 액세스 토큰 발급, 리프레시 토큰은 그대로.

    Exchange a refresh token for a new access token.
    """
    result: AuthResult = await auth_service.refresh_tokens(db, data.refresh_token)
    return ApiResponse(data=result)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    data: RefreshRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """로그아웃 — 리프레시 토큰 세션 폐기.

    Revoke the session holding the given refresh token.
    """
    await auth_service.logout(db, data.refresh_token)
    await db.commit()
    return MessageResponse(message="Successfully logged out")


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: Annotated[UUID, Depends(get_current_user_id)],
) -> ApiResponse[UserResponse]:
    """현재 사용자 프로필 조회.

    Get the profile of the user holding the bearer access token.
    """
    return ApiResponse(data=await auth_service.get_user(db, user_id))
