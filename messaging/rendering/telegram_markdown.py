"""Telegram MarkdownV2 builders, rendered with the strict dialect rules."""

from .dialects import Dialect, rules_for
from .escaping import escape_reserved
from .reassembler import render_span
from .spans import SpanKind, make_span

_RULES = rules_for(Dialect.TELEGRAM)


def escape_md_v2(text: str) -> str:
    """Escape text for MarkdownV2 plain context."""
    return escape_reserved(text, _RULES.reserved)


def mdv2_bold(text: str) -> str:
    return render_span(make_span(SpanKind.BOLD, text), _RULES)


def mdv2_italic(text: str) -> str:
    return render_span(make_span(SpanKind.ITALIC, text), _RULES)


def mdv2_code_inline(text: str) -> str:
    return render_span(make_span(SpanKind.INLINE_CODE, text), _RULES)


def mdv2_link(label: str, url: str) -> str:
    return render_span(make_span(SpanKind.LINK, label, url), _RULES)
