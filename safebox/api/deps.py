"""FastAPI 의존성 주입 모듈 — 액세스 토큰 인증.

FastAPI dependency injection module — Access-token authentication.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 리프레시 토큰은 액세스 토큰으로 사용할 수 없음
       (Refresh-class tokens are rejected)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from safebox.utils.exceptions import UnauthorizedError
from safebox.utils.jwt import TokenInvalidError, TokenPayload, decode_token

# HTTP Bearer 토큰 추출기 — Authorization 헤더에서 JWT 토큰 추출
security: HTTPBearer = HTTPBearer()


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
) -> UUID:
    """액세스 토큰에서 현재 사용자 ID를 추출합니다.

    Decode the bearer access token and return its user id.

    Returns:
        UUID: 인증된 사용자 ID (Authenticated user id)

    Raises:
        UnauthorizedError: 토큰이 유효하지 않거나 만료되었거나 리프레시 토큰일 때
                           (Invalid, expired or refresh-class token)
    """
    try:
        payload: TokenPayload = decode_token(credentials.credentials)
    except TokenInvalidError:
        raise UnauthorizedError("Invalid or expired token")

    # 토큰 타입 검증 — Reject refresh tokens used as access tokens
    if payload.type is not None:
        raise UnauthorizedError("Invalid token type")

    try:
        return UUID(payload.userId)
    except ValueError:
        raise UnauthorizedError("Invalid token")
