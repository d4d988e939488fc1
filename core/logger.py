"""WireLogger -- singleton JSON logger for the tgwire tooling.

Writes one JSON object per line to stderr (keeping stdout free for command
output) and, when a log directory is configured, to a rotating
``tgwire.log`` file in that directory.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Format every log record as a single-line JSON object.

    The keys timestamp, level, logger, message, module and func_name are
    always present.  Anything passed through ``extra`` is merged in, so
    callers attach context such as ``url``, ``method`` or ``drift_count``::

        logger.info("Reference fetched", extra={"url": url, "bytes": 512000})

    Produces::

        {"timestamp": "…", "level": "INFO", …, "url": "…", "bytes": 512000}
    """

    # Attributes of a bare LogRecord; everything else came from ``extra``.
    _BUILTIN_ATTRS: frozenset = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    ))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in log_entry:
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class WireLogger:
    """Singleton owner of the ``tgwire`` :class:`logging.Logger`.

    Usage::

        from core.logger import WireLogger

        logger = WireLogger.get_logger()
        logger.info("Drift check finished", extra={"drift_count": 0})
    """

    _instance: Optional["WireLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "tgwire"
    _LOG_FILE: str = "tgwire.log"
    _MAX_BYTES: int = 2 * 1024 * 1024  # 2 MB
    _BACKUP_COUNT: int = 3

    def __new__(cls, level: int = logging.INFO, log_dir: Optional[str] = None) -> "WireLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level, log_dir)
        return cls._instance

    # ------------------------------------------------------------------
    # Initialisation helpers
    # ------------------------------------------------------------------

    def _init_logger(self, level: int, log_dir: Optional[str]) -> None:
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)
        self._logger.propagate = False

        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()  # stderr
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, self._LOG_FILE),
                maxBytes=self._MAX_BYTES,
                backupCount=self._BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @staticmethod
    def get_logger(level: int = logging.INFO, log_dir: Optional[str] = None) -> logging.Logger:
        """Return the shared logger.

        The first call decides the level and the log directory; later calls
        return the same logger and ignore their arguments.
        """
        instance = WireLogger(level, log_dir)
        assert instance._logger is not None
        return instance._logger

    @classmethod
    def reset(cls) -> None:
        """Close all handlers and forget the singleton (used by tests)."""
        if cls._instance is not None:
            cls._instance.cleanup()
        cls._instance = None

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
