"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.
Provides functions for minting access/refresh tokens and decoding them.

JWT Payload Structure:
    액세스/리프레시 토큰은 같은 비밀키로 서명되며 "type"으로만 구분됩니다.
    Access and refresh tokens share one signing key and differ only by "type":
    {
        "userId": "user_uuid",   # 사용자 ID (User identifier)
        "type": "refresh",       # 리프레시 토큰에만 존재 (Refresh tokens only)
        "jti": "random_hex",     # 토큰 고유값 (Unique per token)
        "iat": 1234567890,       # 발급 시각 (Issued at)
        "exp": 1234567890        # 만료 시각 (Expiration)
    }

Changing JWT_SECRET_KEY invalidates every outstanding token.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Literal

import jwt
from pydantic import BaseModel, ValidationError

from safebox.config import settings
from safebox.schemas.auth import TokenPair

# 리프레시 토큰 구분 태그 — Token class tag carried by refresh tokens
REFRESH_TOKEN_TYPE: str = "refresh"


class TokenInvalidError(Exception):
    """서명, 형식 또는 만료 검증 실패.

    Raised when a token fails signature, format or expiry checks.
    The cause is intentionally not distinguished.
    """


class NotARefreshTokenError(TokenInvalidError):
    """리프레시 토큰이 필요한 곳에 다른 토큰이 제시됨.

    Raised when a valid token without the refresh tag is presented
    where a refresh token is required.
    """


class TokenPayload(BaseModel):
    """디코딩된 토큰 클레임 (Decoded token claims)."""

    userId: str
    type: Literal["refresh"] | None = None


def _encode(claims: dict[str, Any], lifetime_seconds: float) -> str:
    now: datetime = datetime.now(timezone.utc)
    to_encode: dict[str, Any] = {
        **claims,
        "jti": uuid.uuid4().hex,
        "iat": int(now.timestamp()),
        "exp": int(now.timestamp() + lifetime_seconds),
    }
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(user_id: str) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a JWT access token for the given user.
    Token expires after JWT_EXPIRES_IN (default: 15 min) and carries no type tag.

    Args:
        user_id: 사용자 ID 문자열 (User identifier)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    return _encode(
        {"userId": user_id},
        settings.access_token_lifetime.total_seconds(),
    )


def create_refresh_token(user_id: str) -> str:
    """JWT 리프레시 토큰을 생성합니다.

    Generate a JWT refresh token tagged with type "refresh".
    Token expires after JWT_REFRESH_TOKEN_EXPIRE_DAYS (default: 7 days).

    Args:
        user_id: 사용자 ID 문자열 (User identifier)

    Returns:
        str: 인코딩된 JWT 리프레시 토큰 문자열 (Encoded JWT refresh token string)
    """
    return _encode(
        {"userId": user_id, "type": REFRESH_TOKEN_TYPE},
        settings.refresh_token_lifetime.total_seconds(),
    )


def create_token_pair(user_id: str) -> TokenPair:
    """액세스 토큰과 리프레시 토큰 쌍을 생성합니다.

    Issue an access token and a refresh token for the same user.

    Args:
        user_id: 사용자 ID 문자열 (User identifier)

    Returns:
        TokenPair: 토큰 쌍 (Access/refresh token pair)
    """
    return TokenPair(
        access_token=create_access_token(user_id),
        refresh_token=create_refresh_token(user_id),
    )


def decode_token(token: str) -> TokenPayload:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string.
    Expired, tampered, malformed and claim-less tokens all raise the same error.

    Args:
        token: JWT 토큰 문자열 (Encoded JWT token string)

    Returns:
        TokenPayload: 디코딩된 클레임 (Decoded claims)

    Raises:
        TokenInvalidError: 유효하지 않거나 만료된 토큰 (Invalid or expired token)
    """
    try:
        claims: dict[str, Any] = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp"]},
        )
        return TokenPayload.model_validate(claims)
    except (jwt.InvalidTokenError, ValidationError) as exc:
        raise TokenInvalidError("Invalid or expired token") from exc


def decode_refresh_token(token: str) -> TokenPayload:
    """리프레시 토큰을 디코딩하고 토큰 유형을 검증합니다.

    Decode a token and require the refresh type tag.

    Args:
        token: JWT 리프레시 토큰 문자열 (Encoded JWT refresh token string)

    Returns:
        TokenPayload: 디코딩된 클레임 (Decoded claims)

    Raises:
        TokenInvalidError: 유효하지 않거나 만료된 토큰 (Invalid or expired token)
        NotARefreshTokenError: 리프레시 토큰이 아닐 때 (Token is not a refresh token)
    """
    payload: TokenPayload = decode_token(token)
    if payload.type != REFRESH_TOKEN_TYPE:
        raise NotARefreshTokenError("Token is not a refresh token")
    return payload
