"""Inline span extraction.

Spans are located in a fixed precedence order: code block, inline code, link,
bold, italic. Each pass only scans the plain text left over by the passes
before it, so a code span swallows any asterisks or brackets inside it and
spans never overlap, nest or merge. Unterminated delimiters stay plain text.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum


class SpanKind(StrEnum):
    """Structural inline markdown units recognized by the extractor."""

    CODE_BLOCK = "code_block"
    INLINE_CODE = "inline_code"
    LINK = "link"
    BOLD = "bold"
    ITALIC = "italic"


@dataclass(frozen=True, slots=True)
class Span:
    """
    One extracted span.

    raw is the exact matched text with delimiters. content is the text between
    the delimiters (the label for links). url is only set for links.
    """

    kind: SpanKind
    raw: str
    content: str
    delimiter: str
    url: str | None = None

    @property
    def is_code(self) -> bool:
        return self.kind in (SpanKind.CODE_BLOCK, SpanKind.INLINE_CODE)


Segment = str | Span

_CODE_BLOCK_RE = re.compile(r"```([\s\S]*?)```")
_INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
# Label may contain backslash-escaped "]", url may contain backslash-escaped ")"
_LINK_RE = re.compile(r"\[((?:\\.|[^\]\\])+)\]\(((?:\\.|[^)\\])+)\)")
_BOLD_RE = re.compile(r"\*\*([^*\n]+?)\*\*")
# Single asterisk that does not touch another asterisk on the outside
_ITALIC_ASTERISK_RE = re.compile(r"(?<!\*)\*([^*\n]+?)\*(?!\*)")
_ITALIC_UNDERSCORE_RE = re.compile(r"_([^_\n]+?)_")


def _delimited(kind: SpanKind, delimiter: str) -> Callable[[re.Match[str]], Span]:
    def build(m: re.Match[str]) -> Span:
        return Span(kind=kind, raw=m.group(0), content=m.group(1), delimiter=delimiter)

    return build


def _link(m: re.Match[str]) -> Span:
    # Label and url are stored with \] and \) unescaped
    return Span(
        kind=SpanKind.LINK,
        raw=m.group(0),
        content=m.group(1).replace("\\]", "]"),
        delimiter="[",
        url=m.group(2).replace("\\)", ")"),
    )


_PASSES: tuple[tuple[re.Pattern[str], Callable[[re.Match[str]], Span]], ...] = (
    (_CODE_BLOCK_RE, _delimited(SpanKind.CODE_BLOCK, "```")),
    (_INLINE_CODE_RE, _delimited(SpanKind.INLINE_CODE, "`")),
    (_LINK_RE, _link),
    (_BOLD_RE, _delimited(SpanKind.BOLD, "**")),
    (_ITALIC_ASTERISK_RE, _delimited(SpanKind.ITALIC, "*")),
    (_ITALIC_UNDERSCORE_RE, _delimited(SpanKind.ITALIC, "_")),
)


def _split(
    text: str,
    pattern: re.Pattern[str],
    build: Callable[[re.Match[str]], Span],
) -> list[Segment]:
    """Split plain text into alternating plain strings and spans."""
    segments: list[Segment] = []
    last_end = 0
    for m in pattern.finditer(text):
        if m.start() > last_end:
            segments.append(text[last_end : m.start()])
        segments.append(build(m))
        last_end = m.end()
    if last_end < len(text):
        segments.append(text[last_end:])
    return segments


def extract_spans(text: str) -> list[Segment]:
    """Split text into an ordered list of plain strings and spans.

    Joining every plain string and every span's raw text in order reproduces
    the input exactly.
    """
    segments: list[Segment] = [text] if text else []
    for pattern, build in _PASSES:
        next_segments: list[Segment] = []
        for segment in segments:
            if isinstance(segment, Span):
                next_segments.append(segment)
            else:
                next_segments.extend(_split(segment, pattern, build))
        segments = next_segments
    return segments


def spans_of(segments: list[Segment]) -> list[Span]:
    """Return only the spans, in order."""
    return [segment for segment in segments if isinstance(segment, Span)]


def make_span(kind: SpanKind, content: str, url: str | None = None) -> Span:
    """Build a span from unescaped text, as if it had been extracted."""
    if kind == SpanKind.LINK:
        label = content.replace("]", "\\]")
        target = (url or "").replace(")", "\\)")
        return Span(
            kind=kind,
            raw=f"[{label}]({target})",
            content=content,
            delimiter="[",
            url=url,
        )
    delimiter = {
        SpanKind.CODE_BLOCK: "```",
        SpanKind.INLINE_CODE: "`",
        SpanKind.BOLD: "**",
        SpanKind.ITALIC: "*",
    }[kind]
    return Span(
        kind=kind,
        raw=f"{delimiter}{content}{delimiter}",
        content=content,
        delimiter=delimiter,
    )
