"""Tooling configuration -- environment variables and derived constants.

Loads ``TGWIRE_DOCS_URL``, ``TGWIRE_HTTP_TIMEOUT``, ``TGWIRE_LOG_LEVEL`` and
``TGWIRE_LOG_DIR`` from the environment via ``python-dotenv``.  All values
are resolved at import time so other modules can ``from config import …``
without repeated lookups.  Only the docs-sync tooling reads this module;
the ``tgwire`` package never does.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os
from typing import Optional

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import WireLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_DOCS_URL = "https://core.telegram.org/bots/api"
DEFAULT_HTTP_TIMEOUT = 30.0


# ── Helper functions (private) ───────────────────────────────────────────────


def _valid_timeout(raw: Optional[str]) -> Optional[float]:
    """Return *raw* as a positive number of seconds, or ``None``."""
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _parse_timeout(raw: Optional[str]) -> float:
    """Parse a positive number of seconds, falling back to the default."""
    value = _valid_timeout(raw)
    return DEFAULT_HTTP_TIMEOUT if value is None else value


def _parse_level(raw: Optional[str]) -> int:
    """Map a level name (``"debug"``, ``"INFO"`` …) to its numeric value."""
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# ── Public constants ─────────────────────────────────────────────────────────

DOCS_URL: str = os.environ.get("TGWIRE_DOCS_URL") or DEFAULT_DOCS_URL
_RAW_TIMEOUT: Optional[str] = os.environ.get("TGWIRE_HTTP_TIMEOUT")
HTTP_TIMEOUT: float = _parse_timeout(_RAW_TIMEOUT)
LOG_LEVEL: int = _parse_level(os.environ.get("TGWIRE_LOG_LEVEL"))
LOG_DIR: Optional[str] = os.environ.get("TGWIRE_LOG_DIR") or None

# ── Logger (configured from the constants above) ─────────────────────────────
logger = WireLogger.get_logger(LOG_LEVEL, LOG_DIR)


# ── Startup diagnostics ─────────────────────────────────────────────────────

logger.debug(
    "Config loaded",
    extra={
        "docs_url": DOCS_URL,
        "http_timeout": HTTP_TIMEOUT,
        "log_level": logging.getLevelName(LOG_LEVEL),
        "log_dir": LOG_DIR,
    },
)

if _RAW_TIMEOUT and _valid_timeout(_RAW_TIMEOUT) is None:
    logger.warning(
        "TGWIRE_HTTP_TIMEOUT is not a positive number, using default",
        extra={"raw_value": _RAW_TIMEOUT, "http_timeout": HTTP_TIMEOUT},
    )
