"""Tests for environment-driven settings."""

from pathlib import Path

from healthtravel.core.config import Settings, get_settings


class TestSettings:
    """Settings read HEALTHTRAVEL_* variables."""

    def test_defaults(self, monkeypatch):
        """Defaults apply without environment overrides."""
        monkeypatch.delenv("HEALTHTRAVEL_DB_PATH", raising=False)
        settings = Settings(_env_file=None)

        assert settings.db_path == Path("data/healthtravel.db")
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch, tmp_path):
        """Prefixed variables override defaults."""
        monkeypatch.setenv("HEALTHTRAVEL_DB_PATH", str(tmp_path / "x.db"))
        monkeypatch.setenv("HEALTHTRAVEL_CORS_ORIGINS", '["https://travel.example"]')

        settings = Settings(_env_file=None)

        assert settings.db_path == tmp_path / "x.db"
        assert settings.cors_origins == ["https://travel.example"]

    def test_get_settings_is_cached(self):
        """get_settings returns one shared instance."""
        assert get_settings() is get_settings()
