"""Markdown to chat dialect transcoding.

The pipeline runs in four steps, all local to one call:

1. extract spans from the input (code block, inline code, link, bold, italic);
2. replace every span with a placeholder;
3. escape reserved characters outside placeholders;
4. substitute each placeholder with the span rendered in the target dialect.
"""

from loguru import logger

from .dialects import Dialect, DialectRules, rules_for
from .escaping import escape_outside_placeholders
from .placeholders import PlaceholderRegistry
from .reassembler import reassemble
from .spans import extract_spans


def transcode(
    text: str,
    dialect: Dialect | str,
    *,
    rules: DialectRules | None = None,
) -> str:
    """
    Rewrite GitHub-flavored inline markdown into a chat dialect.

    Args:
        text: Markdown text.
        dialect: Target dialect, or its string value.
        rules: Override the dialect's fixed rendering rules.

    Returns:
        The transcoded text. Empty input returns an empty string.

    Raises:
        ValueError: unknown dialect.
        ConflictingInputError: the input contains every sentinel candidate.
        PlaceholderIntegrityError: internal consistency failure.
    """
    dialect = Dialect(dialect)
    if not text:
        return ""
    if rules is None:
        rules = rules_for(dialect)

    with logger.contextualize(dialect=dialect.value):
        segments = extract_spans(text)
        registry = PlaceholderRegistry.for_text(text)
        marked = registry.build(segments)
        escaped = escape_outside_placeholders(marked, rules.reserved, registry.sentinel)
        result = reassemble(escaped, registry.resolve(rules), registry.sentinel)
        logger.debug(
            f"TRANSCODE: dialect={dialect.value} spans={len(registry)} "
            f"in_len={len(text)} out_len={len(result)}"
        )
    return result


def to_slack_markdown(text: str) -> str:
    """Convert markdown to Slack mrkdwn."""
    return transcode(text, Dialect.SLACK)


def to_telegram_markdown(text: str) -> str:
    """Convert markdown to Telegram MarkdownV2."""
    return transcode(text, Dialect.TELEGRAM)
