"""Dialect rendering of extracted spans and placeholder substitution."""

from loguru import logger

from .dialects import DialectRules
from .errors import PlaceholderIntegrityError
from .escaping import escape_reserved
from .spans import Span, SpanKind

# Minimum escaping inside the (...) part of an inline link
_URL_RESERVED = frozenset(")")


def render_span(span: Span, rules: DialectRules) -> str:
    """Render one span in the target dialect.

    Code spans are emitted exactly as written. Bold and italic content, and
    link labels, are escaped when the dialect escapes span content.
    """
    if span.is_code:
        return span.raw

    def inner(text: str) -> str:
        if rules.escape_span_content:
            return escape_reserved(text, rules.reserved)
        return text

    if span.kind == SpanKind.LINK:
        url = span.url or ""
        if rules.link_style == "angle":
            return f"<{url}|{span.content}>"
        url = escape_reserved(
            url, rules.reserved if rules.escape_link_url else _URL_RESERVED
        )
        return f"[{inner(span.content)}]({url})"

    if span.kind == SpanKind.BOLD:
        return f"{rules.bold_delimiter}{inner(span.content)}{rules.bold_delimiter}"

    if span.kind == SpanKind.ITALIC:
        return f"{rules.italic_delimiter}{inner(span.content)}{rules.italic_delimiter}"

    raise ValueError(f"Unsupported span kind: {span.kind!r}")


def reassemble(text: str, replacements: list[tuple[str, str]], sentinel: str) -> str:
    """
    Substitute each placeholder with its rendered span.

    Every replacement consumes exactly one occurrence, the first one, so two
    identical spans never collapse into one.

    Raises:
        PlaceholderIntegrityError: a placeholder is missing from the text or a
            sentinel survives substitution.
    """
    for placeholder, final in replacements:
        if placeholder not in text:
            logger.error(f"REASSEMBLE: placeholder {placeholder!r} not found")
            raise PlaceholderIntegrityError(f"Placeholder {placeholder!r} not found")
        text = text.replace(placeholder, final, 1)

    if sentinel in text:
        logger.error(f"REASSEMBLE: sentinel {sentinel!r} left in output")
        raise PlaceholderIntegrityError("Unresolved placeholder left in output")
    return text
