"""Per-call placeholder registry.

A placeholder is <sentinel>P<n><sentinel>, where the sentinel is a control
character verified absent from the input and n counts up from zero within one
registry. Nothing here is shared between calls.
"""

from loguru import logger

from .dialects import Dialect, DialectRules, rules_for
from .errors import ConflictingInputError
from .reassembler import render_span
from .spans import Segment, Span

# Non-printable, never reserved in any dialect
SENTINEL_CANDIDATES = (
    "\x00",
    "\x01",
    "\x02",
    "\x03",
    "\x04",
    "\x05",
    "\x06",
    "\x07",
    "\x0e",
    "\x0f",
)


class PlaceholderRegistry:
    """Maps placeholders to the spans they stand in for."""

    def __init__(self, sentinel: str = SENTINEL_CANDIDATES[0]):
        self.sentinel = sentinel
        self._entries: list[tuple[str, Span]] = []

    @classmethod
    def for_text(cls, text: str) -> "PlaceholderRegistry":
        """Create a registry whose sentinel does not occur in text.

        Raises:
            ConflictingInputError: every candidate sentinel occurs in text.
        """
        for candidate in SENTINEL_CANDIDATES:
            if candidate not in text:
                return cls(candidate)
        logger.error("PLACEHOLDERS: no free sentinel, input contains all candidates")
        raise ConflictingInputError(
            "Input contains every placeholder sentinel candidate"
        )

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def spans(self) -> list[Span]:
        return [span for _, span in self._entries]

    def register(self, span: Span) -> str:
        """Register a span and return its fresh placeholder."""
        placeholder = f"{self.sentinel}P{len(self._entries)}{self.sentinel}"
        self._entries.append((placeholder, span))
        return placeholder

    def build(self, segments: list[Segment]) -> str:
        """Join segments, registering every span and emitting its placeholder."""
        return "".join(
            segment if isinstance(segment, str) else self.register(segment)
            for segment in segments
        )

    def resolve(self, dialect: Dialect | str | DialectRules) -> list[tuple[str, str]]:
        """Render every registered span, in registration order."""
        rules = dialect if isinstance(dialect, DialectRules) else rules_for(dialect)
        return [
            (placeholder, render_span(span, rules))
            for placeholder, span in self._entries
        ]
