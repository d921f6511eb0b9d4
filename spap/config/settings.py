"""
Application configuration using Pydantic settings.

Configuration is loaded from environment variables once per process.
Every setting accepts its SPAP_-prefixed name (as used by the deployed
function) and, where one exists, the short unprefixed name.

The contents location is validated when the request handler is built,
not here, so that a bad value fails startup with a ConfigurationError
instead of a pydantic error buried in settings loading.
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Publisher settings loaded from environment variables."""

    # Contents
    contents_location: str = Field(
        default="",
        validation_alias=AliasChoices("SPAP_CONTENTS_LOCATION", "CONTENTS_LOCATION"),
        description="ARN (arn:aws:s3:::bucket/prefix) or S3 URL (s3://bucket/prefix) of the SPA build."
    )
    rewrite404: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SPAP_REWRITE404", "REWRITE404"),
        description="Object name served instead when the requested one is missing, e.g. index.html."
    )

    # S3 Storage Configuration
    aws_region: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SPAP_AWS_REGION", "AWS_REGION"),
        description="Region for the S3 client. Falls back to boto3's default chain."
    )
    s3_endpoint_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SPAP_S3_ENDPOINT_URL", "S3_ENDPOINT_URL"),
        description="Override for S3-compatible servers (MinIO, localstack)."
    )
    storage_mock_mode: bool = Field(
        default=False,
        validation_alias="SPAP_STORAGE_MOCK_MODE",
        description="Use in-memory storage instead of S3. Enables local dev without AWS."
    )
    mock_contents_dir: Optional[str] = Field(
        default=None,
        validation_alias="SPAP_MOCK_CONTENTS_DIR",
        description="Local build directory loaded into mock storage at startup."
    )

    # Local development server
    local_base_path: str = Field(
        default="/spa/",
        validation_alias="SPAP_LOCAL_BASE_PATH",
        description="Base path the local server mounts the publisher under."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("SPAP_LOG_LEVEL", "LOG_LEVEL"),
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def route_resource(self) -> str:
        """Route template equivalent to the local base path."""
        base = self.local_base_path
        if not base.startswith("/"):
            base = "/" + base
        if not base.endswith("/"):
            base += "/"
        return base + "{proxy+}"

    def validate_required_fields(self) -> list[str]:
        """Return the names of required settings that are missing."""
        missing = []
        if not self.contents_location:
            missing.append("SPAP_CONTENTS_LOCATION")
        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process and never change afterwards.
    For tests, call get_settings.cache_clear() to reset.
    """
    return Settings()
