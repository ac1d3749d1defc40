"""요청 로깅 미들웨어 및 500 오류 처리 테스트.

Request logging middleware tests — masking and the unexpected-error envelope.
"""

import logging

from httpx import ASGITransport, AsyncClient

from safebox.database import get_db
from safebox.main import app
from safebox.middleware.request_logging import mask_sensitive
from safebox.services.auth_service import auth_service
from tests.conftest import AUTH, register


def test_mask_sensitive_nested():
    masked = mask_sensitive({
        "email": "a@x.com",
        "password": "secret1",
        "refreshToken": "abc",
        "profile": {"apiKey": "k", "name": "Ann"},
        "items": [{"secret": "s"}],
    })
    assert masked == {
        "email": "a@x.com",
        "password": "***",
        "refreshToken": "***",
        "profile": {"apiKey": "***", "name": "Ann"},
        "items": [{"secret": "***"}],
    }


def test_mask_sensitive_passthrough():
    assert mask_sensitive("plain") == "plain"
    assert mask_sensitive([1, 2]) == [1, 2]


async def test_request_logged_without_password(client: AsyncClient, caplog):
    """요청 로그에 비밀번호 원문이 남지 않음."""
    with caplog.at_level(logging.INFO, logger="safebox.request"):
        await register(client, password="hunter22")

    records = [r for r in caplog.records if r.name == "safebox.request"]
    assert records
    event = records[-1].event
    assert event["path"] == f"{AUTH}/register"
    assert event["status_code"] == 201
    assert event["request_body"]["password"] == "***"
    assert "hunter22" not in caplog.text


async def test_error_reason_logged(client: AsyncClient, caplog):
    with caplog.at_level(logging.INFO, logger="safebox.request"):
        await client.post(f"{AUTH}/logout", json={"refreshToken": "nope"})

    event = [r for r in caplog.records if r.name == "safebox.request"][-1].event
    assert event["status_code"] == 404
    assert event["error"] == "Refresh token not found"


async def test_health_not_logged(client: AsyncClient, caplog):
    with caplog.at_level(logging.INFO, logger="safebox.request"):
        await client.get("/health")
    assert not [r for r in caplog.records if r.name == "safebox.request"]


async def test_unexpected_error_is_generic_500(db, monkeypatch):
    """예상치 못한 오류는 내부 정보 없이 500으로 응답."""
    async def _boom(session, email):
        raise RuntimeError("connection refused by db-host-7")

    monkeypatch.setattr(auth_service.users, "get_by_email", _boom)

    async def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.post(f"{AUTH}/login", json={"email": "a@x.com", "password": "secret1"})
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    assert res.json() == {"success": False, "error": "Internal server error"}
    assert "db-host-7" not in res.text
