"""
converter.columns - Decide the column names for a conversion run.
"""

from __future__ import annotations

import csv
from typing import Sequence

from converter.reader import RowReader


def resolve_columns(override: Sequence[str], reader: RowReader) -> list[str]:
    """
    Return the forced column names, or consume the first record as the header.

    With an override the reader is pinned to its length and the first
    record stays data.  Empty input gives [] rather than an error.
    Errors in the header record always propagate.
    """
    if override:
        reader.fields_per_record = len(override)
        return list(override)

    header = reader.read_row()
    if header is None:
        return []
    reader.fields_per_record = len(header)
    return header


def split_columns(values: Sequence[str]) -> list[str]:
    """Flatten comma-delimited column lists, each parsed as one CSV line."""
    columns: list[str] = []
    for value in values:
        columns.extend(next(csv.reader([value]), []))
    return columns
