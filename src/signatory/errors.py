"""Exception hierarchy for signing and envelope operations."""

from __future__ import annotations

__all__ = [
    "DecodeError",
    "EmptyInputError",
    "ParseError",
    "SerializationError",
    "SignatoryError",
]


class SignatoryError(Exception):
    """Base class for every error raised by this package."""


class EmptyInputError(SignatoryError):
    """Parameter set has no entries."""

    def __init__(self, message: str = "Params is empty") -> None:
        super().__init__(message)


class SerializationError(SignatoryError):
    """Parameter set cannot be rendered as JSON text."""


class DecodeError(SignatoryError):
    """Envelope is not valid base64, or its payload is not valid UTF-8."""


class ParseError(SignatoryError):
    """Envelope payload is not a JSON object."""
