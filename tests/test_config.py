"""설정 및 기간 문자열 파싱 테스트.

Configuration tests — duration parsing and startup validation.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from safebox.config import Settings, parse_duration


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("15m", timedelta(minutes=15)),
        ("12h", timedelta(hours=12)),
        ("7d", timedelta(days=7)),
        ("1w", timedelta(weeks=1)),
        ("30s", timedelta(seconds=30)),
        ("900", timedelta(seconds=900)),
        ("1500ms", timedelta(milliseconds=1500)),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "15x", "-5m", "0s", "1.5h"])
def test_parse_duration_rejects(value):
    with pytest.raises(ValueError):
        parse_duration(value)


class TestSettings:
    """기동 시 설정 검증 테스트."""

    def test_missing_secret_is_fatal(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_blank_secret_is_fatal(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "   ")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_bad_expires_in(self, monkeypatch):
        monkeypatch.setenv("JWT_EXPIRES_IN", "soon")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_non_positive_refresh_days(self, monkeypatch):
        monkeypatch.setenv("JWT_REFRESH_TOKEN_EXPIRE_DAYS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("JWT_EXPIRES_IN", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        cfg = Settings(_env_file=None)
        assert cfg.JWT_ALGORITHM == "HS256"
        assert cfg.PORT == 3000
        assert cfg.access_token_lifetime == timedelta(minutes=15)
        assert cfg.refresh_token_lifetime == timedelta(days=cfg.JWT_REFRESH_TOKEN_EXPIRE_DAYS)
