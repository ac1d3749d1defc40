"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Settings are read at import time, so the environment is prepared before any
safebox module is imported. Every test gets a fresh schema.
"""

import os

os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-safebox-tests-0123456789"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ.setdefault("AXIOM_API_TOKEN", "")
os.environ.setdefault("AXIOM_DATASET", "")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from safebox.database import Base, get_db  # noqa: E402
from safebox.main import app  # noqa: E402
from safebox.models import *  # noqa: E402,F401,F403 — register all models with metadata

AUTH = "/auth"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 새 인메모리 스키마를 생성합니다."""
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 — Helpers
# ---------------------------------------------------------------------------
async def register(
    client: AsyncClient,
    email: str = "a@x.com",
    password: str = "secret1",
    name: str | None = "Ann",
) -> dict:
    """사용자를 등록하고 data 필드를 반환합니다."""
    body: dict = {"email": email, "password": password}
    if name is not None:
        body["name"] = name
    res = await client.post(f"{AUTH}/register", json=body)
    assert res.status_code == 201, res.text
    return res.json()["data"]


async def login(client: AsyncClient, email: str = "a@x.com", password: str = "secret1") -> dict:
    """로그인하고 data 필드를 반환합니다."""
    res = await client.post(f"{AUTH}/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["data"]


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
