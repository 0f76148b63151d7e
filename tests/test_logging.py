"""Tests for logging setup"""

import json
import logging

import pytest

from ron_settings.observability import JSONFormatter, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("ron_settings")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


class TestLogging:
    """Test logging configuration"""

    def test_json_formatter_includes_extra(self):
        record = logging.LogRecord(
            "ron_settings.storage", logging.DEBUG, __file__, 10,
            "Loading settings from %s", ("/tmp/settings.ron",), None,
        )
        record.path = "/tmp/settings.ron"

        data = json.loads(JSONFormatter().format(record))

        assert data["message"] == "Loading settings from /tmp/settings.ron"
        assert data["level"] == "DEBUG"
        assert data["path"] == "/tmp/settings.ron"

    def test_setup_logging_honors_env(self, package_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "json")

        setup_logging(level="WARNING")

        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_file(self, package_logger, tmp_path, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        log_file = tmp_path / "settings.log"

        setup_logging(level="INFO", log_file=str(log_file))
        package_logger.info("hello")
        for handler in package_logger.handlers:
            handler.flush()

        assert json.loads(log_file.read_text().splitlines()[0])["message"] == "hello"
