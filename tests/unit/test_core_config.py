"""Unit tests for Settings validation and environment helpers."""

import pytest
from pydantic import ValidationError

from schoolvault.core.config import Settings
from schoolvault.core.enums import Environment

DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.mark.unit
class TestSettings:
    """Test Settings fields and validators."""

    def test_defaults(self):
        settings = Settings(database_url=DATABASE_URL)

        assert settings.trash_retention_days == 90
        assert settings.db_lock_timeout_ms == 5000
        assert settings.log_level == "INFO"

    def test_log_level_is_normalized(self):
        settings = Settings(database_url=DATABASE_URL, log_level="debug")

        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(database_url=DATABASE_URL, log_level="verbose")

    @pytest.mark.parametrize("days", [0, -5])
    def test_retention_below_one_day_rejected(self, days):
        with pytest.raises(ValidationError, match="trash_retention_days"):
            Settings(database_url=DATABASE_URL, trash_retention_days=days)

    def test_retention_from_environment(self, monkeypatch):
        monkeypatch.setenv("TRASH_RETENTION_DAYS", "30")

        settings = Settings(database_url=DATABASE_URL)

        assert settings.trash_retention_days == 30

    def test_database_url_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings()  # type: ignore[call-arg]

    @pytest.mark.parametrize(
        ("environment", "uses_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_json_logs_outside_development(self, environment, uses_json):
        settings = Settings(database_url=DATABASE_URL, environment=environment)

        assert settings.uses_json_logs is uses_json

    def test_environment_helpers(self):
        settings = Settings(database_url=DATABASE_URL, environment="production")

        assert settings.is_production is True
        assert settings.is_development is False
        assert settings.is_testing is False
