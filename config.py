"""
csv2json - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.  Per-conversion settings are
not configuration: they travel in converter.ConversionOptions.
"""

from __future__ import annotations
import os


VERSION = "0.4.0"

# ── Logging ────────────────────────────────────────────────────────────
# Default -v count when the flag is not given (0 = warnings and errors)
LOG_VERBOSITY = int(os.environ.get("CSV2JSON_LOG_LEVEL", "0"))
LOG_JSON      = os.environ.get("CSV2JSON_LOG_JSON", "0") == "1"

# ── Server ─────────────────────────────────────────────────────────────
HOST   = os.environ.get("CSV2JSON_HOST", "127.0.0.1")
PORT   = int(os.environ.get("CSV2JSON_PORT", "5000"))
DEBUG  = os.environ.get("CSV2JSON_DEBUG", "0") == "1"

# Largest request body /api/v1/convert will accept
MAX_UPLOAD_BYTES = int(os.environ.get("CSV2JSON_MAX_UPLOAD", str(16 * 1024 * 1024)))
