"""
converter.errors - Exception hierarchy for a conversion run.

RowError subclasses describe a single malformed record and are the only
errors the skip policy may swallow.  Everything else aborts the run.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every error raised by the converter."""
    pass


class InputUnavailable(ConversionError):
    """The CSV source could not be opened or read."""
    pass


class RowError(ConversionError):
    """A single CSV record could not be parsed."""

    def __init__(self, line: int, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"record on line {line}: {reason}")


class QuoteError(RowError):
    """Malformed quoting inside a record."""
    pass


class FieldCountMismatch(RowError):

    def __init__(self, line: int, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(
            line, f"wrong number of fields (expected {expected}, got {got})")


class SerializationError(ConversionError):
    """The records could not be encoded or written as JSON."""
    pass
