"""Tests for the JSON logger and the tooling configuration helpers."""

import importlib
import json
import logging
import sys
import os
from unittest.mock import patch

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import config
from core.logger import WireLogger, _JsonFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("tgwire", logging.INFO, __file__, 10, "Reference %s", ("fetched",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# ── _JsonFormatter ───────────────────────────────────────────────────────────


class TestJsonFormatter:
    def test_standard_keys(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "tgwire"
        assert entry["message"] == "Reference fetched"
        assert {"timestamp", "module", "func_name"} <= set(entry)

    def test_extra_fields_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record(url="https://x", bytes=12)))
        assert entry["url"] == "https://x"
        assert entry["bytes"] == 12

    def test_unserialisable_extra(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record(obj=object())))
        assert entry["obj"].startswith("<object")


# ── WireLogger ───────────────────────────────────────────────────────────────


class TestWireLogger:
    def test_singleton(self) -> None:
        assert WireLogger.get_logger() is WireLogger.get_logger()
        assert WireLogger.get_logger().name == "tgwire"

    def test_rotating_file(self, tmp_path) -> None:
        WireLogger.reset()
        try:
            logger = WireLogger.get_logger(logging.DEBUG, str(tmp_path / "logs"))
            logger.info("Drift check finished", extra={"drift_count": 0})
            for handler in logger.handlers:
                handler.flush()
            lines = (tmp_path / "logs" / "tgwire.log").read_text(encoding="utf-8").splitlines()
            assert json.loads(lines[-1])["drift_count"] == 0
        finally:
            WireLogger.reset()
            WireLogger.get_logger(config.LOG_LEVEL, config.LOG_DIR)


# ── config helpers ───────────────────────────────────────────────────────────


class TestConfig:
    def test_parse_timeout(self) -> None:
        assert config._parse_timeout("12.5") == 12.5
        assert config._parse_timeout(None) == config.DEFAULT_HTTP_TIMEOUT
        assert config._parse_timeout("soon") == config.DEFAULT_HTTP_TIMEOUT
        assert config._parse_timeout("-1") == config.DEFAULT_HTTP_TIMEOUT

    def test_valid_timeout(self) -> None:
        assert config._valid_timeout("30") == 30.0
        assert config._valid_timeout("0") is None
        assert config._valid_timeout("soon") is None
        assert config._valid_timeout("") is None

    @pytest.mark.parametrize("raw,warned", [("30", False), ("45", False), ("soon", True), ("-5", True)])
    def test_invalid_timeout_warning(self, monkeypatch, raw: str, warned: bool) -> None:
        monkeypatch.setenv("TGWIRE_HTTP_TIMEOUT", raw)
        try:
            with patch.object(WireLogger.get_logger(), "warning") as mock_warning:
                importlib.reload(config)
            assert mock_warning.called is warned
        finally:
            monkeypatch.delenv("TGWIRE_HTTP_TIMEOUT")
            importlib.reload(config)

    def test_parse_level(self) -> None:
        assert config._parse_level("debug") == logging.DEBUG
        assert config._parse_level("WARNING") == logging.WARNING
        assert config._parse_level("chatty") == logging.INFO
        assert config._parse_level(None) == logging.INFO

    def test_docs_url_default(self) -> None:
        assert config.DEFAULT_DOCS_URL == "https://core.telegram.org/bots/api"
        assert config.DOCS_URL
