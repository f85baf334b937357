"""daturl exception hierarchy.

All package-specific exceptions inherit from :class:`DatUrlError`.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Which parsing step rejected the input."""

    INVALID_SCHEME = "invalid_scheme"
    EMPTY_HOST = "empty_host"
    INVALID_FINGERPRINT = "invalid_fingerprint"


class DatUrlError(Exception):
    """Base exception for all daturl errors."""


class ParseError(DatUrlError, ValueError):
    """Raised when a string cannot be turned into a :class:`DatUrl`.

    ``kind`` identifies the failing step and ``raw`` holds the rejected input.
    """

    kind: ParseErrorKind

    def __init__(self, message: str = "", raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class InvalidSchemeError(ParseError):
    """Raised when the input does not start with ``dat://``."""

    kind = ParseErrorKind.INVALID_SCHEME


class EmptyHostError(ParseError):
    """Raised when nothing follows the scheme before a path, query or fragment."""

    kind = ParseErrorKind.EMPTY_HOST


class InvalidFingerprintError(ParseError):
    """Raised when a host must be a fingerprint and is not."""

    kind = ParseErrorKind.INVALID_FINGERPRINT


class InvalidFieldError(DatUrlError, ValueError):
    """Raised when a field passed to a constructor breaks a model invariant."""
