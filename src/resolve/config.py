"""Registry configuration using Pydantic Settings."""

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolveSettings(BaseSettings):
    """Registry configuration from environment variables.

    Read once when a registry is constructed. Identifiers loaded from the
    environment are strings; construct the settings directly to map classes,
    modules or any other hashable objects.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="RESOLVE_",
        extra="ignore",
    )

    compile: bool = Field(
        default=False,
        description="Fix mappings at startup and disable runtime injection",
    )
    mappings: list[tuple[Any, Any]] = Field(
        default_factory=list,
        description="Ordered (logical, implementation) pairs; later pairs win",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level for the resolve package logger",
    )

    @field_validator("mappings")
    @classmethod
    def _logical_identifiers_hashable(
        cls, value: list[tuple[Any, Any]]
    ) -> list[tuple[Any, Any]]:
        for logical, _ in value:
            try:
                hash(logical)
            except TypeError as e:
                raise ValueError(f"Logical identifier {logical!r} is not hashable") from e
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level {value!r}")
        return level


@lru_cache
def get_settings() -> ResolveSettings:
    """Get cached settings instance."""
    return ResolveSettings()
