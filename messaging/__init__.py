"""Platform-agnostic messaging layer."""

from .platforms import Platform, dialect_for_platform, format_for_platform
from .rendering import (
    ConflictingInputError,
    Dialect,
    PlaceholderIntegrityError,
    TranscodeError,
    transcode,
)

__all__ = [
    "ConflictingInputError",
    "Dialect",
    "PlaceholderIntegrityError",
    "Platform",
    "TranscodeError",
    "dialect_for_platform",
    "format_for_platform",
    "transcode",
]
