"""Slack mrkdwn builders, rendered with the Slack dialect rules."""

from .dialects import Dialect, rules_for
from .reassembler import render_span
from .spans import SpanKind, make_span

_RULES = rules_for(Dialect.SLACK)


def slack_bold(text: str) -> str:
    return render_span(make_span(SpanKind.BOLD, text), _RULES)


def slack_italic(text: str) -> str:
    return render_span(make_span(SpanKind.ITALIC, text), _RULES)


def slack_code_inline(text: str) -> str:
    return render_span(make_span(SpanKind.INLINE_CODE, text), _RULES)


def slack_link(label: str, url: str) -> str:
    return render_span(make_span(SpanKind.LINK, label, url), _RULES)
