"""
converter.driver - Top-level orchestrator.

Coordinates bom → reader → columns → record, then writes the whole
record list as one JSON array.  Nothing is written until the input
has been read to the end, so a failed run leaves the output untouched.
"""

from __future__ import annotations

import io
import json
import logging
from dataclasses import dataclass, field
from typing import IO, Optional

from converter.bom import open_text
from converter.columns import resolve_columns
from converter.errors import RowError, SerializationError
from converter.reader import RowReader
from converter.record import build_record
from converter.report import ConversionReport

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    """Per-run settings.  Build one per conversion; nothing here is global."""
    columns: list[str] = field(default_factory=list)
    skip_errors: bool = False
    indent: Optional[int] = None
    logger: logging.Logger = logger


def convert(
    csv_input: IO,
    json_output: IO,
    options: Optional[ConversionOptions] = None,
) -> ConversionReport:
    """
    Convert CSV from csv_input into a JSON array written to json_output.

    Parameters
    ----------
    csv_input : binary or text stream holding CSV
    json_output : binary or text stream receiving the JSON
    options : ConversionOptions (defaults: header from first row, no skipping)

    Returns
    -------
    ConversionReport describing what was converted and skipped.

    Raises InputUnavailable, QuoteError, FieldCountMismatch or
    SerializationError.  Row errors on data rows are only raised when
    options.skip_errors is false; header errors are always raised.
    """
    options = options or ConversionOptions()
    log = options.logger
    report = ConversionReport()

    reader = RowReader(open_text(csv_input))
    report.columns = resolve_columns(options.columns, reader)
    log.debug(f"Using {len(report.columns)} columns: {report.columns}")

    records: list[dict[str, str]] = []
    while True:
        try:
            row = reader.read_row()
        except RowError as exc:
            if not options.skip_errors:
                raise
            report.total_rows += 1
            report.add_error(exc.line, exc.reason)
            log.error(f"Skipped parsing error: {exc}")
            continue

        if row is None:
            break
        report.total_rows += 1
        records.append(build_record(report.columns, row))

    report.converted = len(records)
    if report.skipped:
        log.info(f"Skipped {report.skipped} lines (rows) due to parsing errors")

    _write(json_output, _encode(records, options.indent))
    log.debug(f"Wrote {report.converted} records")
    return report


def convert_text(
    data: str | bytes,
    options: Optional[ConversionOptions] = None,
) -> tuple[str, ConversionReport]:
    """Convert an in-memory CSV document; return (json_text, report)."""
    source = io.BytesIO(data) if isinstance(data, bytes) else io.StringIO(data)
    sink = io.StringIO()
    report = convert(source, sink, options)
    return sink.getvalue(), report


# ── Private helpers ────────────────────────────────────────────────────

def _encode(records: list[dict[str, str]], indent: Optional[int]) -> str:
    try:
        return json.dumps(records, ensure_ascii=False, indent=indent) + "\n"
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode JSON: {exc}") from exc


def _write(out: IO, text: str):
    """Write in one call; binary sinks get UTF-8."""
    binary = isinstance(out, (io.RawIOBase, io.BufferedIOBase))
    payload = text.encode("utf-8") if binary else text
    try:
        out.write(payload)
        out.flush()
    except (OSError, ValueError) as exc:
        raise SerializationError(f"cannot write JSON: {exc}") from exc
