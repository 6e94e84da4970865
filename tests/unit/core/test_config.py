"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from storefront.core.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.FALLBACK_CUSTOMER_GROUP_ID == "EK"
        assert settings.CONTEXT_PARALLEL_LOOKUPS is False
        assert settings.MAX_RETRIES >= 1

    def test_log_level_is_normalized(self):
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="LOUD")

    def test_blank_fallback_group_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, FALLBACK_CUSTOMER_GROUP_ID="  ")

    def test_environment_values(self):
        settings = Settings(_env_file=None, ENVIRONMENT="Production")

        assert settings.is_production is True
        assert settings.is_development is False

    def test_database_host_hides_credentials(self):
        settings = Settings(_env_file=None, DATABASE_URL="mysql+aiomysql://user:secret@db:3306/shop")

        assert settings.database_host == "db:3306/shop"

    def test_env_variables_are_read(self, monkeypatch):
        monkeypatch.setenv("FALLBACK_CUSTOMER_GROUP_ID", "H")
        monkeypatch.setenv("CONTEXT_PARALLEL_LOOKUPS", "true")

        settings = Settings(_env_file=None)

        assert settings.FALLBACK_CUSTOMER_GROUP_ID == "H"
        assert settings.CONTEXT_PARALLEL_LOOKUPS is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
