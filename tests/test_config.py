"""Tests for environment-driven Settings."""

from grana_sheets.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("GRANA_API_URL", "STOCKS_API_URL", "GRANA_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        s = Settings()
        assert s.GRANA_API_URL == "https://app.grana.io/api"
        assert s.STOCKS_API_URL == "https://pafuncio.herokuapp.com"
        assert s.OWNER_EMAIL_VAR == "GRANA_OWNER_EMAIL"
        assert s.LOG_LEVEL == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("GRANA_API_URL", "http://localhost:5000/api/")
        monkeypatch.setenv("GRANA_LOG_LEVEL", "debug")
        s = Settings()
        assert s.GRANA_API_URL == "http://localhost:5000/api"
        assert s.LOG_LEVEL == "DEBUG"
