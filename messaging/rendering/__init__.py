"""Markdown rendering for messaging platforms."""

from .dialects import DIALECT_RULES, MDV2_RESERVED, Dialect, DialectRules, rules_for
from .errors import ConflictingInputError, PlaceholderIntegrityError, TranscodeError
from .slack_markdown import slack_bold, slack_code_inline, slack_italic, slack_link
from .spans import Span, SpanKind, extract_spans, make_span
from .telegram_markdown import (
    escape_md_v2,
    mdv2_bold,
    mdv2_code_inline,
    mdv2_italic,
    mdv2_link,
)
from .transcoder import to_slack_markdown, to_telegram_markdown, transcode

__all__ = [
    "DIALECT_RULES",
    "MDV2_RESERVED",
    "ConflictingInputError",
    "Dialect",
    "DialectRules",
    "PlaceholderIntegrityError",
    "Span",
    "SpanKind",
    "TranscodeError",
    "escape_md_v2",
    "extract_spans",
    "make_span",
    "mdv2_bold",
    "mdv2_code_inline",
    "mdv2_italic",
    "mdv2_link",
    "rules_for",
    "slack_bold",
    "slack_code_inline",
    "slack_italic",
    "slack_link",
    "to_slack_markdown",
    "to_telegram_markdown",
    "transcode",
]
