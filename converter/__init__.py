"""
converter - CSV to JSON conversion engine.

Public API:
    convert(csv_input, json_output, options) → ConversionReport
    convert_text(data, options)              → (json_text, ConversionReport)
    build_record(columns, row)               → dict
"""

from converter.driver import ConversionOptions, convert, convert_text   # noqa: F401
from converter.record import build_record                              # noqa: F401
from converter.report import ConversionReport                           # noqa: F401
from converter.errors import (                                          # noqa: F401
    ConversionError,
    InputUnavailable,
    RowError,
    QuoteError,
    FieldCountMismatch,
    SerializationError,
)
