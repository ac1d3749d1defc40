"""세션 레포지토리 — 리프레시 토큰 세션 CRUD.

Session Repository — Persistence adapter for refresh-token sessions.
Holds no business rules: "not found" is reported as absence (None or a
zero row count), never as an error. Storage faults propagate unchanged.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from safebox.models.session import UserSession


class SessionRepository:
    """세션 관련 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling the sessions table.
    """

    async def create(
        self,
        db: AsyncSession,
        user_id: UUID,
        refresh_token: str,
        expires_at: datetime,
    ) -> UserSession:
        """새 세션을 생성합니다.

        Create a new session row for a refresh token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 세션 소유자 사용자 ID (Owner user UUID)
            refresh_token: JWT 리프레시 토큰 문자열 (Refresh token value)
            expires_at: 세션 만료 일시 (Session expiry timestamp)

        Returns:
            UserSession: 생성된 세션 레코드 (Created session record)
        """
        db_session: UserSession = UserSession(
            user_id=user_id,
            refresh_token=refresh_token,
            expires_at=expires_at,
        )
        db.add(db_session)
        await db.flush()
        await db.refresh(db_session)
        return db_session

    async def get_by_token(
        self,
        db: AsyncSession,
        refresh_token: str,
        user_id: UUID | None = None,
    ) -> UserSession | None:
        """리프레시 토큰 값으로 세션을 조회합니다.

        Retrieve a session by exact token value, with its owner loaded.
        When user_id is given the row must also belong to that user.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            refresh_token: 조회할 리프레시 토큰 문자열 (Refresh token value)
            user_id: 소유자 필터 (Optional owner filter)

        Returns:
            UserSession | None: 조회된 세션 또는 None (Found session or None)
        """
        query: Select = (
            select(UserSession)
            .options(selectinload(UserSession.user))
            .where(UserSession.refresh_token == refresh_token)
        )
        if user_id is not None:
            query = query.where(UserSession.user_id == user_id)

        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def delete_by_token(
        self,
        db: AsyncSession,
        refresh_token: str,
    ) -> int:
        """리프레시 토큰 값과 일치하는 세션을 삭제합니다.

        Delete the session matching a token value.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            refresh_token: 삭제할 리프레시 토큰 문자열 (Refresh token value)

        Returns:
            int: 삭제된 행 수 (Number of rows deleted)
        """
        stmt = delete(UserSession).where(UserSession.refresh_token == refresh_token)
        result = await db.execute(stmt)
        await db.flush()
        return result.rowcount or 0

    async def delete_all_for_user(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> int:
        """특정 사용자의 모든 세션을 삭제합니다.

        Delete every session of a user (logout from all devices).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 대상 사용자 ID (Target user UUID)

        Returns:
            int: 삭제된 행 수 (Number of rows deleted)
        """
        stmt = delete(UserSession).where(UserSession.user_id == user_id)
        result = await db.execute(stmt)
        await db.flush()
        return result.rowcount or 0


# 싱글턴 인스턴스 — Singleton instance
session_repository: SessionRepository = SessionRepository()
