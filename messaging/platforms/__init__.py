"""Messaging platforms and the dialect each one expects."""

from enum import StrEnum

from loguru import logger

from config.settings import Settings, get_settings
from messaging.rendering.dialects import Dialect, rules_for
from messaging.rendering.transcoder import transcode


class Platform(StrEnum):
    SLACK = "slack"
    TELEGRAM = "telegram"
    DISCORD = "discord"


def dialect_for_platform(
    platform: Platform | str, settings: Settings | None = None
) -> Dialect | None:
    """Return the dialect a platform expects, or None for plain text."""
    platform = Platform(platform)
    if platform == Platform.SLACK:
        return Dialect.SLACK
    if platform == Platform.TELEGRAM:
        return Dialect.TELEGRAM
    settings = settings or get_settings()
    if settings.discord_dialect is None:
        return None
    return Dialect(settings.discord_dialect)


def format_for_platform(
    platform: Platform | str, text: str, settings: Settings | None = None
) -> str:
    """
    Prepare message text for a platform.

    Platforms without a dialect get the text unchanged. Transcoding errors
    propagate: the caller must not send the message.
    """
    platform = Platform(platform)
    settings = settings or get_settings()
    dialect = dialect_for_platform(platform, settings)
    if dialect is None:
        return text

    rules = rules_for(dialect)
    if dialect == Dialect.TELEGRAM:
        rules = rules.model_copy(
            update={"escape_link_url": settings.telegram_escape_link_urls}
        )

    with logger.contextualize(platform=platform.value):
        return transcode(text, dialect, rules=rules)


__all__ = ["Platform", "dialect_for_platform", "format_for_platform"]
