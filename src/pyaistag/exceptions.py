"""Custom exception hierarchy for pyaistag."""

from __future__ import annotations


class AisTagError(Exception):
    """Base exception for all pyaistag errors."""


class AisTagConfigError(AisTagError):
    """Invalid or missing configuration."""


class InvalidEnumerationError(AisTagError, ValueError):
    """A wire literal has no matching enum member.

    Raised by :meth:`pyaistag.models.SourceType.decode` and, transitively,
    by :meth:`pyaistag.models.Tagging.parse` when a comment block holds a
    malformed ``st`` value.  Callers decide whether to drop the whole
    record or just the field.
    """

    def __init__(self, message: str, *, value: str = "") -> None:
        self.value = value
        super().__init__(message)


class NullInputError(AisTagError, TypeError):
    """A required argument was ``None``."""

    def __init__(self, message: str, *, argument: str = "") -> None:
        self.argument = argument
        super().__init__(message)
