"""
converter.record - Key one record's values by column name.
"""

from __future__ import annotations

from typing import Sequence


def build_record(columns: Sequence[str], row: Sequence[str]) -> dict[str, str]:
    """
    Pair columns with values at the same index.

    Columns past the end of a short row are left out; values past the
    last column are dropped.
    """
    return dict(zip(columns, row))
