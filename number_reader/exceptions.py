"""
Custom exception hierarchy for number reading.

Each exception type maps to one category of rejected input, so callers (the
CLI, the HTTP layer) can report a machine-readable code without parsing
messages. Conversion is all-or-nothing: these are raised before any words
are produced.
"""

from __future__ import annotations


class NumberReadingError(Exception):
    """Base exception for all number reading failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnsupportedInputKindError(NumberReadingError, TypeError):
    """The value is neither a decimal-literal string nor an integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNSUPPORTED_INPUT_KIND", message, details)


class MalformedLiteralError(NumberReadingError, ValueError):
    """The string is not a sign / digits / point / digits literal."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MALFORMED_LITERAL", message, details)


class MagnitudeOutOfRangeError(NumberReadingError, ValueError):
    """The integral part has more groups than the magnitude table can name."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OUT_OF_RANGE", message, details)
