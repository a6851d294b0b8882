"""Tests for logging setup and redaction"""
import json
import logging

import pytest

from fleet_cli.core.logging import (
    JSONFormatter,
    SensitiveDataFilter,
    redact_message,
    resolve_log_level,
    setup_logging,
)


class TestRedactMessage:
    """Tests for message redaction"""

    @pytest.mark.parametrize(
        "message, secret",
        [
            ("api_key=abc123", "abc123"),
            ("BALENA_API_KEY=abc123", "abc123"),
            ("token: 'xyz'", "xyz"),
            ('{"password": "hunter2"}', "hunter2"),
            ("Authorization: Bearer eyJhbGciOi", "eyJhbGciOi"),
            ("sent bearer eyJhbGciOi upstream", "eyJhbGciOi"),
        ],
    )
    def test_secret_removed(self, message, secret):
        redacted = redact_message(message)
        assert secret not in redacted
        assert "[REDACTED]" in redacted

    def test_plain_message_untouched(self):
        message = "Fetched 3 variable(s) for application 'MyApp'"
        assert redact_message(message) == message

    def test_similar_words_untouched(self):
        assert redact_message("token_count=5") == "token_count=5"


class TestSensitiveDataFilter:
    """Tests for the record filter"""

    def test_filters_message_and_extras(self):
        record = logging.makeLogRecord({"msg": "login with token=%s", "args": ("abc",), "api_key": "k-1"})
        assert SensitiveDataFilter().filter(record) is True
        assert "abc" not in record.getMessage()
        assert record.api_key == "[REDACTED]"

    def test_idempotent(self):
        record = logging.makeLogRecord({"msg": "secret=abc"})
        f = SensitiveDataFilter()
        f.filter(record)
        first = record.msg
        f.filter(record)
        assert record.msg == first


class TestJSONFormatter:
    """Tests for structured log output"""

    def test_one_json_object_per_record(self):
        record = logging.makeLogRecord(
            {"name": "fleet_cli.test", "levelname": "INFO", "msg": "hello", "operation": "list"}
        )
        entry = json.loads(JSONFormatter().format(record))
        assert entry["message"] == "hello"
        assert entry["level"] == "INFO"
        assert entry["logger"] == "fleet_cli.test"
        assert entry["operation"] == "list"

    def test_redacts(self):
        record = logging.makeLogRecord({"msg": "api_key=abc123"})
        assert "abc123" not in JSONFormatter().format(record)


class TestResolveLogLevel:
    """Tests for level priority"""

    def test_default_is_warning(self, clean_env):
        assert resolve_log_level() == "WARNING"

    def test_env_var(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert resolve_log_level() == "DEBUG"

    def test_argument_wins(self, clean_env, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert resolve_log_level("error") == "ERROR"

    def test_invalid_falls_back(self, capsys):
        assert resolve_log_level("LOUD") == "WARNING"
        assert "Invalid log level" in capsys.readouterr().err


class TestSetupLogging:
    """Tests for handler configuration"""

    def test_single_stderr_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.root.handlers) == 1
        handler = logging.root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.level == logging.INFO
        assert any(isinstance(f, SensitiveDataFilter) for f in handler.filters)

    def test_json_format(self):
        setup_logging("DEBUG", log_format="json")
        assert isinstance(logging.root.handlers[0].formatter, JSONFormatter)

    def test_nothing_on_stdout(self, capsys):
        logger = setup_logging("DEBUG")
        logger.warning("careful")
        captured = capsys.readouterr()
        assert captured.out == ""
