"""Tests for settings and logging configuration."""

from storage_gateway.config.logging_config import (
    FORMAT_STRINGS,
    LogFormat,
    LoggingConfig,
    get_log_level_from_verbosity,
)
from storage_gateway.config.settings import StorageGatewaySettings


class TestSettings:

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("API_ROOT_PREFIX", "/v2/files")
        monkeypatch.setenv("HASURA_ADMIN_SECRET", "topsecret")
        monkeypatch.setenv("WEBP_QUALITY", "65")

        settings = StorageGatewaySettings(_env_file=None)

        assert settings.api_root_prefix == "/v2/files"
        assert settings.hasura_admin_secret.get_secret_value() == "topsecret"
        assert settings.webp_quality == 65
        assert "topsecret" not in repr(settings)

    def test_production_flag(self):
        assert StorageGatewaySettings(_env_file=None, environment="Production").is_production
        assert not StorageGatewaySettings(_env_file=None, environment="development").is_production


class TestLoggingConfig:

    def test_verbosity_mapping(self):
        assert get_log_level_from_verbosity("quiet") == "ERROR"
        assert get_log_level_from_verbosity("DEBUG") == "DEBUG"
        assert get_log_level_from_verbosity("chatty") == "WARNING"

    def test_build_silences_transport_libraries(self):
        config = LoggingConfig.build(StorageGatewaySettings(_env_file=None, log_level="debug"))

        assert config["loggers"]["botocore"]["level"] == "ERROR"
        assert config["loggers"]["aiohttp"]["level"] == "ERROR"
        assert config["loggers"]["PIL"]["level"] == "WARNING"
        assert config["loggers"]["storage_gateway"]["level"] == "DEBUG"

    def test_unknown_format_falls_back_to_simple(self):
        config = LoggingConfig.build(StorageGatewaySettings(_env_file=None, log_format="xml"))

        assert config["formatters"]["default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]
