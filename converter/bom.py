"""
converter.bom - Byte-order-mark aware text decoding.

Peeks at the first character of the input and drops it only when it
is U+FEFF.  Anything else is handed back untouched, in front of the
rest of the stream.
"""

from __future__ import annotations

import io
from typing import IO, Iterator

from converter.errors import InputUnavailable

BOM = "\ufeff"


def open_text(stream: IO) -> Iterator[str]:
    """
    Return an iterator of text lines (line endings kept) for a binary
    or text stream, minus a leading BOM.

    Binary input is decoded as UTF-8 with undecodable bytes replaced.
    Raises InputUnavailable if the first read fails.
    """
    wrapped = not isinstance(stream, io.TextIOBase)
    text = io.TextIOWrapper(stream, encoding="utf-8", errors="replace",
                            newline="") if wrapped else stream
    try:
        first = text.read(1)
    except (OSError, ValueError) as exc:
        raise InputUnavailable(f"cannot read input: {exc}") from exc

    if first == BOM:
        first = ""
    return _lines(first, text, wrapped)


def _lines(first: str, text: IO[str], wrapped: bool) -> Iterator[str]:
    try:
        # Put the peeked character back in front of its line
        if first:
            yield first + text.readline()
        yield from text
    finally:
        # The caller owns the underlying stream; don't close it on GC
        if wrapped:
            text.detach()
