"""
converter.logs - stderr logging setup for the CLI and server.

Two line formats:
  • plain  → level=info logger=converter.driver msg="..."
  • json   → {"level": "info", "logger": "...", "message": "..."}
"""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Optional

ROOT_LOGGER = "converter"

# verbosity (-v count) → minimum level
_LEVELS = {0: logging.WARNING, 1: logging.INFO}


class PlainFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        msg = (record.getMessage()
               .replace("\\", "\\\\")
               .replace('"', '\\"')
               .replace("\n", "\\n")
               .replace("\r", "\\r"))
        line = f'level={record.levelname.lower()} logger={record.name} msg="{msg}"'
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class JsonFormatter(logging.Formatter):

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def level_for(verbosity: int) -> int:
    return _LEVELS.get(verbosity, logging.DEBUG)


def configure_logging(
    verbosity: int = 0,
    json_format: bool = False,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling again replaces the previous handler, so the CLI can be run
    repeatedly in one process (tests do this).
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonFormatter() if json_format else PlainFormatter())
    root.addHandler(handler)
    root.setLevel(level_for(verbosity))
    return root
