"""
converter.report - Structured result of a conversion run.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ConversionReport:
    columns: list[str] = field(default_factory=list)
    total_rows: int = 0
    converted: int = 0
    skipped: int = 0
    errors: list[dict] = field(default_factory=list)   # [{line, reason}]

    def add_error(self, line: int, reason: str):
        self.errors.append({"line": line, "reason": reason})
        self.skipped += 1

    def to_dict(self) -> dict:
        return {
            "columns": self.columns,
            "total_rows": self.total_rows,
            "converted": self.converted,
            "skipped": self.skipped,
            "errors": self.errors,
        }
