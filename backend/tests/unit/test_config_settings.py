"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest

from blog_api.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_app_env_is_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_EXPIRES_MINUTES", "15")

    settings = Settings(_env_file=None)

    assert settings.is_production
    assert settings.jwt_expires_minutes == 15


def test_unknown_app_env_is_rejected(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "staging")

    with pytest.raises(ValueError):
        Settings(_env_file=None)


def test_production_with_default_secret_warns(monkeypatch: pytest.MonkeyPatch, caplog):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with caplog.at_level("WARNING", logger="blog_api.config"):
        Settings(_env_file=None)

    assert "JWT_SECRET is not configured" in caplog.text
