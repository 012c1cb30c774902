"""
Test suite for configuration and structured logging
"""

import json
import logging
import sys

import pytest
from pydantic import ValidationError

from bancario import config as config_module
from bancario.config import BancarioConfig, get_config, reload_config
from bancario.logging_config import JSONFormatter, setup_logging, get_logger, log_action


class TestConfig:
    """Test environment-based configuration"""

    def test_defaults(self, monkeypatch):
        for name in ("BANCARIO_LOG_LEVEL", "BANCARIO_LOG_FORMAT",
                     "BANCARIO_ACCOUNT_NUMBER_PREFIX", "BANCARIO_ACCOUNT_NUMBER_WIDTH"):
            monkeypatch.delenv(name, raising=False)

        settings = BancarioConfig(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.account_number_prefix == "CONTA"
        assert settings.account_number_width == 6

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BANCARIO_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("bancario_account_number_width", "8")

        settings = BancarioConfig(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.account_number_width == 8

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            BancarioConfig(_env_file=None, account_number_width=0)
        with pytest.raises(ValidationError):
            BancarioConfig(_env_file=None, log_format="xml")

    def test_reload_config(self, monkeypatch):
        original = get_config()
        monkeypatch.setenv("BANCARIO_ACCOUNT_NUMBER_PREFIX", "ACC")
        try:
            reloaded = reload_config()
            assert reloaded is get_config()
            assert reloaded.account_number_prefix == "ACC"
        finally:
            config_module.config = original


def _record(logger_name="bancario.test", **fields):
    record = logging.LogRecord(logger_name, logging.INFO, __file__, 1, "hello %s", ("world",), None)
    for key, value in fields.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSON log output"""

    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(_record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello world"
        assert entry["logger"] == "bancario.test"
        assert "timestamp" in entry

    def test_none_fields_dropped(self):
        entry = json.loads(JSONFormatter().format(_record()))
        for key in ("client_id", "action", "resource", "extra"):
            assert key not in entry

    def test_structured_fields(self):
        record = _record(client_id=7, action="authenticate", resource="IndividualClient",
                         extra={"reason": "weak_password"})
        entry = json.loads(JSONFormatter().format(record))

        assert entry["client_id"] == 7
        assert entry["action"] == "authenticate"
        assert entry["resource"] == "IndividualClient"
        assert entry["extra"] == {"reason": "weak_password"}

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        entry = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestSetupLogging:
    """Test logger setup"""

    LOGGER_NAME = "bancario_setup_test"

    def test_json_handler(self):
        logger = setup_logging(level="DEBUG", logger_name=self.LOGGER_NAME, log_format="json")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert not logger.propagate

    def test_text_handler(self):
        logger = setup_logging(level="warning", logger_name=self.LOGGER_NAME, log_format="text")

        assert logger.level == logging.WARNING
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(logger_name=self.LOGGER_NAME)
        logger = setup_logging(logger_name=self.LOGGER_NAME)
        assert len(logger.handlers) == 1

    def test_get_logger(self):
        assert get_logger().name == "bancario"
        assert get_logger("bancario.clients").name == "bancario.clients"


class TestLogAction:
    """Test structured action logging"""

    def test_fields_attached_to_record(self, caplog):
        logger = logging.getLogger("bancario.test.actions")
        with caplog.at_level(logging.INFO, logger="bancario.test.actions"):
            log_action(logger, "info", "did something", client_id=3, action="act",
                       resource="thing", extra={"k": "v"})

        record = caplog.records[-1]
        assert record.getMessage() == "did something"
        assert record.client_id == 3
        assert record.action == "act"
        assert record.resource == "thing"
        assert record.extra == {"k": "v"}

    def test_level_respected(self, caplog):
        logger = logging.getLogger("bancario.test.levels")
        with caplog.at_level(logging.WARNING, logger="bancario.test.levels"):
            log_action(logger, "info", "hidden")
            log_action(logger, "warning", "shown")

        messages = [r.getMessage() for r in caplog.records]
        assert "shown" in messages
        assert "hidden" not in messages
