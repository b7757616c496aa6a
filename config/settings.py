"""Application settings loaded from the environment and .env."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Transcoder settings. Dialect rules themselves are fixed, see DialectRules."""

    log_file: str = "transcoder.log"
    log_level: Literal[
        "TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"
    ] = "DEBUG"

    # Escape reserved characters inside link URLs sent to Telegram
    telegram_escape_link_urls: bool = True
    # Discord receives plain text unless a dialect is set
    discord_dialect: Literal["slack", "telegram"] | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("discord_dialect", mode="before")
    @classmethod
    def parse_optional_dialect(cls, v):
        if v == "" or v is None:
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v).upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
