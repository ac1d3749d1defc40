"""JWT 토큰 발급/검증 테스트.

Token issuer tests — pairing, expiry, tampering and type checks.
"""

import time

import jwt
import pytest

from safebox.config import settings
from safebox.utils.jwt import (
    REFRESH_TOKEN_TYPE,
    NotARefreshTokenError,
    TokenInvalidError,
    create_access_token,
    create_refresh_token,
    create_token_pair,
    decode_refresh_token,
    decode_token,
)

USER_ID = "2b1f0c7e-4a57-4d8e-9a40-1a7d3c5e9f10"


def _raw(token: str) -> dict:
    return jwt.decode(token, options={"verify_signature": False})


class TestIssue:
    """토큰 발급 테스트."""

    def test_pair_shares_subject(self):
        pair = create_token_pair(USER_ID)
        assert decode_token(pair.access_token).userId == USER_ID
        assert decode_refresh_token(pair.refresh_token).userId == USER_ID

    def test_access_token_has_no_type(self):
        assert "type" not in _raw(create_access_token(USER_ID))

    def test_refresh_token_tagged(self):
        assert _raw(create_refresh_token(USER_ID))["type"] == REFRESH_TOKEN_TYPE

    def test_lifetimes(self):
        access = _raw(create_access_token(USER_ID))
        refresh = _raw(create_refresh_token(USER_ID))
        assert access["exp"] - access["iat"] == 15 * 60
        assert refresh["exp"] - refresh["iat"] == settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS * 86400

    def test_same_second_tokens_differ(self):
        """같은 초에 발급해도 jti로 서로 다른 토큰."""
        assert create_refresh_token(USER_ID) != create_refresh_token(USER_ID)

    def test_custom_access_lifetime(self, monkeypatch):
        monkeypatch.setattr(settings, "JWT_EXPIRES_IN", "2h")
        claims = _raw(create_access_token(USER_ID))
        assert claims["exp"] - claims["iat"] == 7200


class TestDecode:
    """토큰 검증 실패 테스트."""

    def test_expired(self):
        now = int(time.time())
        token = jwt.encode(
            {"userId": USER_ID, "iat": now - 120, "exp": now - 60},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        with pytest.raises(TokenInvalidError):
            decode_token(token)

    def test_tampered(self):
        token = create_access_token(USER_ID)
        header, payload, signature = token.split(".")
        flipped = ("A" if signature[0] != "A" else "B") + signature[1:]
        with pytest.raises(TokenInvalidError):
            decode_token(f"{header}.{payload}.{flipped}")

    def test_wrong_secret(self):
        token = jwt.encode(
            {"userId": USER_ID, "exp": int(time.time()) + 60},
            "some-other-secret-of-sufficient-length",
            algorithm="HS256",
        )
        with pytest.raises(TokenInvalidError):
            decode_token(token)

    def test_missing_exp(self):
        token = jwt.encode({"userId": USER_ID}, settings.JWT_SECRET_KEY, algorithm="HS256")
        with pytest.raises(TokenInvalidError):
            decode_token(token)

    def test_missing_user_id(self):
        token = jwt.encode(
            {"exp": int(time.time()) + 60}, settings.JWT_SECRET_KEY, algorithm="HS256"
        )
        with pytest.raises(TokenInvalidError):
            decode_token(token)

    def test_garbage(self):
        with pytest.raises(TokenInvalidError):
            decode_token("not-a-jwt")

    def test_access_token_is_not_refresh(self):
        with pytest.raises(NotARefreshTokenError):
            decode_refresh_token(create_access_token(USER_ID))

    def test_not_refresh_is_invalid_subclass(self):
        assert issubclass(NotARefreshTokenError, TokenInvalidError)
