"""인증 서비스 — 회원가입, 로그인, 토큰 갱신, 로그아웃 비즈니스 로직.

Auth Service — Business logic for registration, login, token refresh and logout.

Session rules:
    - 회원가입/로그인 시 리프레시 토큰마다 세션 행을 하나 생성
      (Register and login store one session row per refresh token)
    - 로그인은 해당 사용자의 기존 세션을 모두 삭제 (Login is a hard session reset)
    - 토큰 갱신은 액세스 토큰만 재발급, 리프레시 토큰은 회전하지 않음
      (Refresh reissues the access token only; the refresh token is not rotated)
    - 세션 행의 존재가 폐기 여부의 기준 (Session rows are the revocation source of truth)
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from safebox.models.user import User
from safebox.repositories.session_repository import SessionRepository, session_repository
from safebox.repositories.user_repository import UserRepository, user_repository
from safebox.schemas.auth import (
    AuthResult,
    LoginRequest,
    RegisterRequest,
    TokenPair,
    UserResponse,
)
from safebox.utils.exceptions import (
    InvalidCredentialsError,
    InvalidOrExpiredTokenError,
    NotFoundError,
    TokenNotFoundError,
    UserExistsError,
)
from safebox.utils.jwt import (
    TokenInvalidError,
    TokenPayload,
    create_access_token,
    create_token_pair,
    decode_refresh_token,
)
from safebox.utils.password import DUMMY_PASSWORD_HASH, hash_password, verify_password

logger = logging.getLogger("safebox.auth")

# 세션 행 보존 기간 — 토큰 자체의 exp(JWT_REFRESH_TOKEN_EXPIRE_DAYS)와 별개
# Session row TTL; independent of the refresh token's own exp claim
SESSION_TTL: timedelta = timedelta(days=7)


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic. Holds no request state;
    the stores are injected so tests can substitute in-memory fakes.

    Attributes:
        users: 사용자 저장소 (User store)
        sessions: 세션 저장소 (Session store)
    """

    def __init__(
        self,
        users: UserRepository,
        sessions: SessionRepository,
    ) -> None:
        self.users = users
        self.sessions = sessions

    async def _store_session(
        self,
        db: AsyncSession,
        user_id: UUID,
        refresh_token: str,
    ) -> None:
        """리프레시 토큰을 새 세션으로 저장합니다.

        Persist a refresh token as a session expiring SESSION_TTL from now.
        """
        expires_at: datetime = datetime.now(timezone.utc) + SESSION_TTL
        await self.sessions.create(
            db, user_id=user_id, refresh_token=refresh_token, expires_at=expires_at
        )

    async def register(
        self,
        db: AsyncSession,
        data: RegisterRequest,
    ) -> AuthResult:
        """회원가입을 처리합니다.

        Create a user, issue a token pair and open a session.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Registration request data)

        Returns:
            AuthResult: 사용자 정보와 토큰 쌍 (User and token pair)

        Raises:
            UserExistsError: 같은 이메일이 이미 존재할 때 (Email already registered)
        """
        existing: User | None = await self.users.get_by_email(db, data.email)
        if existing is not None:
            raise UserExistsError()

        try:
            user: User = await self.users.create(
                db,
                {
                    "email": data.email,
                    "password_hash": hash_password(data.password),
                    "name": data.name,
                },
            )
        except IntegrityError as exc:
            # 동시 가입 경합 — 유니크 제약이 최종 판정 (unique constraint decides races)
            await db.rollback()
            raise UserExistsError() from exc

        tokens: TokenPair = create_token_pair(str(user.id))
        await self._store_session(db, user.id, tokens.refresh_token)

        logger.info("Registered user %s", user.id)
        return AuthResult(user=UserResponse.model_validate(user), tokens=tokens)

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> AuthResult:
        """로그인을 처리합니다.

        Authenticate by email/password, then replace every existing session
        of the user with a single new one.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)

        Returns:
            AuthResult: 사용자 정보와 새 토큰 쌍 (User and fresh token pair)

        Raises:
            InvalidCredentialsError: 이메일 또는 비밀번호 불일치 (Unknown email or wrong password)
        """
        user: User | None = await self.users.get_by_email(db, data.email)
        if user is None:
            # 응답 시간으로 계정 존재 여부가 드러나지 않도록 bcrypt 실행
            verify_password(data.password, DUMMY_PASSWORD_HASH)
            raise InvalidCredentialsError()
        if not verify_password(data.password, user.password_hash):
            raise InvalidCredentialsError()

        tokens: TokenPair = create_token_pair(str(user.id))

        # 기존 세션 전부 삭제 후 새 세션 저장 — Hard reset of the user's sessions
        revoked: int = await self.sessions.delete_all_for_user(db, user.id)
        await self._store_session(db, user.id, tokens.refresh_token)

        logger.info("User %s logged in, %d previous session(s) revoked", user.id, revoked)
        return AuthResult(user=UserResponse.model_validate(user), tokens=tokens)

    async def refresh_tokens(
        self,
        db: AsyncSession,
        refresh_token: str,
    ) -> AuthResult:
        """리프레시 토큰으로 새 액세스 토큰을 발급합니다.

        Issue a new access token. The token must verify cryptographically AND
        still have a matching session row owned by the token's user. The same
        refresh token is returned unchanged.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            refresh_token: 리프레시 토큰 문자열 (Refresh token value)

        Returns:
            AuthResult: 사용자 정보, 새 액세스 토큰과 기존 리프레시 토큰
                        (User, new access token, same refresh token)

        Raises:
            InvalidOrExpiredTokenError: 서명/만료/유형 검증 실패 (Bad, expired or non-refresh token)
            TokenNotFoundError: 일치하는 세션 없음 (No matching session, i.e. revoked)
        """
        try:
            payload: TokenPayload = decode_refresh_token(refresh_token)
        except TokenInvalidError as exc:
            raise InvalidOrExpiredTokenError() from exc

        try:
            user_id: UUID = UUID(payload.userId)
        except ValueError as exc:
            raise InvalidOrExpiredTokenError() from exc

        session = await self.sessions.get_by_token(db, refresh_token, user_id=user_id)
        if session is None:
            raise TokenNotFoundError()

        access_token: str = create_access_token(str(session.user_id))
        return AuthResult(
            user=UserResponse.model_validate(session.user),
            tokens=TokenPair(access_token=access_token, refresh_token=refresh_token),
        )

    async def logout(
        self,
        db: AsyncSession,
        refresh_token: str,
    ) -> None:
        """로그아웃 처리 — 리프레시 토큰 세션을 삭제합니다.

        Delete the session holding this refresh token. The token itself is
        not verified, so an expired token can still be logged out.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            refresh_token: 삭제할 리프레시 토큰 (Refresh token to revoke)

        Raises:
            TokenNotFoundError: 삭제된 세션이 없을 때 (No session matched)
        """
        deleted: int = await self.sessions.delete_by_token(db, refresh_token)
        if deleted == 0:
            raise TokenNotFoundError()
        logger.info("Session revoked by logout")

    async def get_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> UserResponse:
        """사용자 공개 정보를 반환합니다.

        Return a user's public fields.

        Raises:
            NotFoundError: 사용자가 없을 때 (Unknown user)
        """
        user: User | None = await self.users.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService(user_repository, session_repository)
