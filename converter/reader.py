"""
converter.reader - Strict CSV record reader.

Thin layer over csv.reader that:
  • enforces a fixed field count (explicit, or taken from the first row)
  • turns csv.Error into QuoteError with the offending line number
  • rejects bare quotes in unquoted fields (csv.reader lets them through)
  • skips blank lines
  • reports end of input as None rather than an exception
"""

from __future__ import annotations

import csv
from typing import Iterable, Iterator, Optional

from converter.errors import FieldCountMismatch, InputUnavailable, QuoteError

# Fields have no size cap; the csv default is 128 KiB
csv.field_size_limit(2**31 - 1)


class RowReader:
    """
    Reads one CSV record at a time from an iterable of text lines.

    fields_per_record=None means "fix the count from the first row read".
    """

    def __init__(self, lines: Iterable[str], fields_per_record: Optional[int] = None):
        self._raw: list[str] = []          # source lines of the current record
        self._csv = csv.reader(self._capture(lines), strict=True)
        self.fields_per_record = fields_per_record

    def read_row(self) -> Optional[list[str]]:
        """
        Return the next record, or None at end of input.
        Raises QuoteError / FieldCountMismatch for a malformed record.
        """
        while True:
            start = self._csv.line_num + 1
            self._raw.clear()
            try:
                row = next(self._csv)
            except StopIteration:
                return None
            except csv.Error as exc:
                raise QuoteError(start, str(exc)) from exc
            except (OSError, ValueError) as exc:
                raise InputUnavailable(f"cannot read input: {exc}") from exc
            if row:
                break

        if _has_bare_quote("".join(self._raw)):
            raise QuoteError(start, 'bare " in non-quoted field')
        if self.fields_per_record is None:
            self.fields_per_record = len(row)
        elif len(row) != self.fields_per_record:
            raise FieldCountMismatch(start, self.fields_per_record, len(row))
        return row

    def _capture(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            self._raw.append(line)
            yield line


def _has_bare_quote(raw: str) -> bool:
    """
    True if a quote appears in a field that did not open with one.

    Only called on text csv.reader already accepted in strict mode, so
    a closing quote is always followed by a delimiter, newline or "".
    """
    in_quotes = closed = False
    field_start = True
    for c in raw:
        if in_quotes:
            if c == '"':
                in_quotes, closed = False, True
            continue
        if c == '"':
            if closed:
                # "" inside a quoted field
                in_quotes, closed = True, False
            elif field_start:
                in_quotes = True
            else:
                return True
        else:
            closed = False
        field_start = c in ",\r\n"
    return False
