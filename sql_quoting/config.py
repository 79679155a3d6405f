"""Quoting configuration loaded from environment variables."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from environment variables with SQL_QUOTING_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="SQL_QUOTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = False

    # Dialect used when callers pass no dialect handle
    default_dialect: str = "ansi"

    # Hex digit case of blob literals from the default quoter
    blob_hex_uppercase: bool = False

    @field_validator("default_dialect", mode="before")
    @classmethod
    def normalise_dialect(cls, v: object) -> str:
        name = str(getattr(v, "value", v)).strip().lower()
        if not name:
            raise ValueError("default_dialect must not be empty")
        return name


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info(
            "Loaded quoting settings: default_dialect=%s blob_hex_uppercase=%s",
            settings.default_dialect,
            settings.blob_hex_uppercase,
        )

    return settings
