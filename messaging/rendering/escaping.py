"""Backslash escaping of reserved dialect characters."""

import re
from collections.abc import Set
from functools import lru_cache

from loguru import logger

from .errors import PlaceholderIntegrityError


@lru_cache(maxsize=8)
def _reserved_pattern(reserved: frozenset[str]) -> re.Pattern[str]:
    chars = "".join(re.escape(ch) for ch in sorted(reserved))
    # An existing backslash before a reserved char already escapes it
    return re.compile(rf"\\?([{chars}])")


def escape_reserved(text: str, reserved: Set[str]) -> str:
    """Prefix every reserved character in text with exactly one backslash.

    A reserved character that is already backslash-escaped is copied through.
    """
    if not text or not reserved:
        return text
    return _reserved_pattern(frozenset(reserved)).sub(r"\\\1", text)


def escape_outside_placeholders(text: str, reserved: Set[str], sentinel: str) -> str:
    """
    Escape reserved characters in plain regions of placeholder-bearing text.

    A placeholder runs from a sentinel to the next sentinel, inclusive, and is
    copied through as one unit without inspecting its bytes.

    Raises:
        PlaceholderIntegrityError: a sentinel has no closing partner.
    """
    parts: list[str] = []
    pos = 0
    while True:
        start = text.find(sentinel, pos)
        if start == -1:
            parts.append(escape_reserved(text[pos:], reserved))
            break
        end = text.find(sentinel, start + 1)
        if end == -1:
            logger.error(f"ESCAPE: unterminated placeholder at offset {start}")
            raise PlaceholderIntegrityError(
                f"Unterminated placeholder starting at offset {start}"
            )
        parts.append(escape_reserved(text[pos:start], reserved))
        parts.append(text[start : end + 1])
        pos = end + 1
    return "".join(parts)
