# -*- coding: utf-8 -*-
"""Package settings read from the environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. WALLET__ADDRESS_BYTE_LENGTH, LOGGING__LEVEL.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Defaults for configure_logging()."""

    model_config = SettingsConfigDict(extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    json_format: bool = False


class WalletSettings(BaseSettings):
    """Wallet address conventions (from env WALLET__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    address_byte_length: int = Field(
        default=20,
        ge=0,
        description="Byte length of an account address (20 for Ethereum-style accounts).",
    )


class Settings(BaseSettings):
    """Root settings; the only place environment variables are read."""

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    wallet: WalletSettings = Field(default_factory=WalletSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Sections are overridden with dicts, e.g. from_env(wallet={"address_byte_length": 32}).
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return the cached Settings instance."""
    return Settings()
