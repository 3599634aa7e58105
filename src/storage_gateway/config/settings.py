"""
Configuration management for the storage gateway.

Settings are read from environment variables (and an optional ``.env`` file)
once per process and shared through ``get_settings``.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageGatewaySettings(BaseSettings):
    """Storage gateway settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="storage-gateway")
    app_version: str = Field(default="0.3.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    api_root_prefix: str = Field(default="/v1/storage")

    # Upload Configuration
    default_bucket_id: str = Field(default="default")
    webp_quality: int = Field(default=80, ge=1, le=100)

    # Metadata Registry (Hasura GraphQL)
    hasura_endpoint: str = Field(default="http://localhost:8080/v1/graphql")
    hasura_admin_secret: SecretStr = Field(default=SecretStr(""))
    registry_timeout_seconds: int = Field(default=30)

    # Content Store (S3 compatible)
    s3_endpoint: Optional[str] = Field(default=None)
    s3_access_key: Optional[str] = Field(default=None)
    s3_secret_key: SecretStr = Field(default=SecretStr(""))
    s3_region: str = Field(default="us-east-1")
    s3_bucket: str = Field(default="storage")
    s3_root_folder: str = Field(default="")

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_verbosity: str = Field(default="VERBOSE")
    log_format: str = Field(default="simple")

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment.lower() == "production"


@lru_cache()
def get_settings() -> StorageGatewaySettings:
    """Get cached settings instance."""
    return StorageGatewaySettings()
