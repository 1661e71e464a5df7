"""Unit tests for settings loading."""

import pytest

from document_service.config.settings import Settings, get_settings


@pytest.mark.unit
class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("SEED_SAMPLE_DATA", "SERVICE_NAME", "PORT", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.service_name == "fm-document-service"
        assert settings.port == 8007
        assert settings.seed_sample_data is True
        assert settings.cors_origins == ["*"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.seed_sample_data is False
        assert settings.port == 9000
        assert settings.log_level == "debug"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
