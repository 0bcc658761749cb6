"""
Configuration settings for synthload.

Uses Pydantic Settings to load environment variables for the store location,
the load parameters and logging. CLI options override individual fields
through `validate_settings`.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from synthload.errors import ConfigurationError


class Settings(BaseSettings):
    # Store
    store_name: str = Field("kvstore", alias="SYNTHLOAD_STORE_NAME")
    store_host: str = Field("localhost", alias="SYNTHLOAD_HOST")
    store_port: int = Field(5432, alias="SYNTHLOAD_PORT", ge=1, le=65535)
    store_user: str = Field("postgres", alias="SYNTHLOAD_USER")
    store_password: str = Field("postgres", alias="SYNTHLOAD_PASSWORD")
    security_file: Optional[Path] = Field(None, alias="SYNTHLOAD_SECURITY_FILE")
    connect_timeout: int = Field(10, alias="SYNTHLOAD_CONNECT_TIMEOUT", ge=1)

    # Load
    records: int = Field(10, alias="SYNTHLOAD_RECORDS", ge=0)
    delete_existing: bool = Field(False, alias="SYNTHLOAD_DELETE_EXISTING")
    seed: Optional[int] = Field(None, alias="SYNTHLOAD_SEED")
    max_key_attempts: int = Field(10_000, alias="SYNTHLOAD_MAX_KEY_ATTEMPTS", ge=1)
    results_dir: Path = Field(Path("results"), alias="SYNTHLOAD_RESULTS_DIR")
    trace_allocations: bool = Field(False, alias="SYNTHLOAD_TRACE_ALLOCATIONS")

    # Application
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def target(self) -> str:
        """Human-readable store location, used in messages."""
        return f"{self.store_host}:{self.store_port}/{self.store_name}"


def validate_settings(settings: Settings, **overrides: Any) -> Settings:
    """
    Apply CLI overrides and re-run validation.

    Init arguments take precedence over the environment, so the merged values are
    validated again and any failure is reported as a ConfigurationError.
    """
    values: Dict[str, Any] = settings.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


__all__ = ["Settings", "get_settings", "validate_settings"]
