"""Environment driven settings for neo-authz."""

from functools import lru_cache
from typing import Optional

from pydantic import Field, PostgresDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CacheTTL, DatabaseSchemas, DefaultRoles


class AuthzSettings(BaseSettings):
    """Settings for the authorization engine.

    Every field can be overridden with a ``NEO_AUTHZ_`` prefixed
    environment variable, e.g. ``NEO_AUTHZ_ROLE_CACHE_TTL_SECONDS=60``.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEO_AUTHZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Role catalog
    role_cache_ttl_seconds: float = Field(default=CacheTTL.ROLE_CATALOG)
    default_role: str = Field(default=DefaultRoles.USER)

    # Role data provider
    database_url: Optional[PostgresDsn] = Field(default=None)
    role_schema: str = Field(default=DatabaseSchemas.ADMIN)
    role_table: str = Field(default="roles")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")

    @field_validator("role_cache_ttl_seconds")
    @classmethod
    def validate_ttl(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("role_cache_ttl_seconds must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in {"simple", "detailed", "json"}:
            raise ValueError(f"Unsupported log format: {value}")
        return fmt

    @property
    def is_database_configured(self) -> bool:
        """Check if a PostgreSQL role source is configured."""
        return self.database_url is not None


@lru_cache()
def get_settings() -> AuthzSettings:
    """Get cached settings instance."""
    return AuthzSettings()
