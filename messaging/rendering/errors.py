"""Errors raised while transcoding markdown into a chat dialect."""


class TranscodeError(Exception):
    """Base class for transcoding failures. The message must not be sent."""


class ConflictingInputError(TranscodeError):
    """Input already contains every candidate placeholder sentinel."""


class PlaceholderIntegrityError(TranscodeError):
    """A placeholder was lost, truncated or left in the output."""
