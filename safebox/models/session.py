"""세션 모델 — 리프레시 토큰 발급 기록 저장.

Session model — Stores one outstanding refresh-token grant per row.
A row is the source of truth for revocation: a cryptographically valid
refresh token without a matching row is treated as revoked.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from safebox.database import Base


class UserSession(Base):
    """세션 테이블.

    Session table binding a refresh-token value to its owning user.
    Rows are created on register/login and deleted on logout or on the
    owner's next login; they are never updated in place.

    Attributes:
        id: 고유 식별자 (Primary key UUID)
        user_id: 소유 사용자 ID (Owner user UUID)
        refresh_token: JWT 리프레시 토큰 문자열 (Refresh token value, unique)
        expires_at: 만료 일시, 생성 시 고정 (Expiry, fixed at creation)
        created_at: 생성 일시 (Creation timestamp)
    """

    __tablename__ = "sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    refresh_token: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    user = relationship("User", back_populates="sessions")
