# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRETS = ("dev", "development", "test", "secret", "")


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///blogapi.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")

    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class SecurityConfig(BaseSettings):
    allowed_origins: list[str] = Field(["*"], alias="ALLOWED_ORIGINS")
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)


class ObservabilityConfig(BaseSettings):
    metrics_enabled: bool = Field(True, alias="METRICS_ENABLED")

    model_config = SettingsConfigDict(validate_by_name=True, extra="ignore")


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


def _observability_config_factory() -> ObservabilityConfig:
    return ObservabilityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("dev", alias="SECRET_KEY")
    token_lifetime: int = Field(3600, ge=1, alias="TOKEN_LIFETIME")
    token_algorithm: str = Field("HS256", alias="TOKEN_ALGORITHM")
    conflict_status: int = Field(500, alias="CONFLICT_STATUS")
    page_limit: int = Field(100, ge=1, alias="PAGE_LIMIT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)
    observability: ObservabilityConfig = Field(default_factory=_observability_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("conflict_status")
    @classmethod
    def _check_conflict_status(cls, value: int) -> int:
        if value not in (409, 500):
            raise ValueError("CONFLICT_STATUS must be 409 or 500")
        return value

    @field_validator("token_algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        # Signing key is a shared secret, so only HMAC algorithms make sense.
        if value not in ("HS256", "HS384", "HS512"):
            raise ValueError("TOKEN_ALGORITHM must be one of HS256, HS384, HS512")
        return value

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self
        if self.secret_key in _INSECURE_SECRETS:
            raise ValueError(
                "Insecure SECRET_KEY in production. "
                "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\""
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "DatabaseConfig",
    "ObservabilityConfig",
    "SecurityConfig",
    "load_config",
]
