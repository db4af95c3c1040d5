"""
Configuration for the client application.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Environment-backed settings for talking to the API server."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    main_service_url: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices(
            "MAIN_SERVICE_URL", "API_URL", "main_service_url"
        ),
    )
    request_timeout: float = Field(
        default=30,
        validation_alias=AliasChoices("REQUEST_TIMEOUT", "request_timeout"),
    )
    with_credentials: bool = Field(
        default=True,
        validation_alias=AliasChoices("WITH_CREDENTIALS", "with_credentials"),
    )


@lru_cache(maxsize=1)
def get_client_settings() -> ClientSettings:
    """Return cached settings instance."""
    return ClientSettings()
