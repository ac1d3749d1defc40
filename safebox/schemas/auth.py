"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers registration, login, token refresh/logout, and public user data.
JSON field names are camelCase on the wire (accessToken, refreshToken, ...).
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# 이메일 형식 — local@domain.tld (Email shape check)
EMAIL_PATTERN: str = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CamelModel(BaseModel):
    """camelCase 별칭을 사용하는 기본 스키마.

    Base schema exposing camelCase aliases while keeping snake_case attributes.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RegisterRequest(CamelModel):
    """회원가입 요청 스키마.

    Registration request schema.

    Attributes:
        email: 로그인 이메일 (Login email, unique)
        password: 비밀번호 (Plain text, will be bcrypt-hashed on server)
        name: 표시 이름 (Optional display name)
    """

    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6, max_length=72)  # bcrypt는 72바이트까지만 사용
    name: str | None = Field(default=None, max_length=255)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginRequest(CamelModel):
    """로그인 요청 스키마.

    Login request schema.

    Attributes:
        email: 로그인 이메일 (Login email)
        password: 비밀번호 (Plain text, compared against bcrypt hash)
    """

    email: str = Field(max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1, max_length=72)


class RefreshRequest(CamelModel):
    """토큰 갱신/로그아웃 요청 스키마.

    Token refresh and logout request schema.

    Attributes:
        refresh_token: 기존 리프레시 토큰 (Existing refresh token)
    """

    refresh_token: str = Field(min_length=1)


class TokenPair(CamelModel):
    """JWT 토큰 쌍.

    JWT access/refresh token pair. Only the refresh token is persisted.

    Attributes:
        access_token: JWT 액세스 토큰 (Short-lived access token)
        refresh_token: JWT 리프레시 토큰 (Long-lived refresh token)
    """

    access_token: str
    refresh_token: str


class UserResponse(CamelModel):
    """공개 사용자 정보 스키마 — 비밀번호 해시 제외.

    Public user fields. The password hash is never part of this schema.
    """

    id: UUID
    email: str
    name: str | None
    created_at: datetime
    updated_at: datetime


class AuthResult(CamelModel):
    """인증 결과 — 사용자와 토큰 쌍.

    Result of register, login and refresh.
    """

    user: UserResponse
    tokens: TokenPair
