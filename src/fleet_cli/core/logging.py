"""Logging helpers for the fleet CLI.

Command output owns stdout, so every log record goes to stderr.
"""

import contextlib
import json
import logging
import os
import re
import sys
from datetime import datetime, timezone

from fleet_cli.core.constants import DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS

_LOG_RECORD_RESERVED_FIELDS = set(logging.makeLogRecord({}).__dict__.keys()) | {"message", "asctime"}
_REDACTION_FLAG_ATTR = "_fleet_redacted"
_REDACTED_VALUE = "[REDACTED]"
_SENSITIVE_FIELD_NAMES = {
    "password",
    "passwd",
    "secret",
    "token",
    "api_key",
    "apikey",
    "access_token",
    "refresh_token",
    "authorization",
}
_SENSITIVE_KEY_REGEX = r"api[_-]?key|apikey|access[_-]?token|refresh[_-]?token|password|passwd|secret|token"
_VALUE_REGEX = r"""(?:"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|[^,\s;}\]]+)"""
_AUTHORIZATION_PATTERN = re.compile(
    r"""(?i)(?P<key>["']?authorization["']?\s*[:=]\s*["']?)(?P<scheme>bearer\s+)?(?P<value>[A-Za-z0-9._~+/=-]+)"""
)
_BEARER_PATTERN = re.compile(r"(?i)\b(bearer)\s+([A-Za-z0-9._~+/=-]+)")
_KEY_VALUE_PATTERN = re.compile(
    rf"""(?ix)
    (?P<key>["']?(?<![A-Za-z0-9_])[A-Za-z0-9_]*?(?:{_SENSITIVE_KEY_REGEX})(?![A-Za-z0-9_])["']?)
    (?P<separator>\s*[:=]\s*)
    (?P<value>{_VALUE_REGEX})
    """
)


def _normalize_field_name(name: str) -> str:
    separated = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name.strip())
    return re.sub(r"[^a-z0-9]+", "_", separated.lower()).strip("_")


def _is_sensitive_field(name: str) -> bool:
    normalized = _normalize_field_name(name)
    if normalized in _SENSITIVE_FIELD_NAMES:
        return True
    parts = normalized.split("_")
    return "token" in parts or "secret" in parts or "password" in parts or parts[-2:] == ["api", "key"]


def _redact_captured_value(value: str) -> str:
    if len(value) >= 2 and value[0] in {"'", '"'} and value[-1] == value[0]:
        return f"{value[0]}{_REDACTED_VALUE}{value[0]}"
    return _REDACTED_VALUE


def _redact_authorization(match: re.Match[str]) -> str:
    return f"{match.group('key')}{match.group('scheme') or ''}{_REDACTED_VALUE}"


def _redact_key_value(match: re.Match[str]) -> str:
    return f"{match.group('key')}{match.group('separator')}{_redact_captured_value(match.group('value'))}"


def redact_message(message: str) -> str:
    """Mask tokens, API keys and Authorization headers inside a log message."""
    redacted = _AUTHORIZATION_PATTERN.sub(_redact_authorization, message)
    redacted = _KEY_VALUE_PATTERN.sub(_redact_key_value, redacted)
    return _BEARER_PATTERN.sub(lambda m: f"{m.group(1)} {_REDACTED_VALUE}", redacted)


def _redact_value(value: object) -> object:
    if isinstance(value, dict):
        return {
            key: _REDACTED_VALUE if _is_sensitive_field(str(key)) else _redact_value(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_redact_value(item) for item in value)
    if isinstance(value, str):
        return redact_message(value)
    return value


def _safe_record_message(record: logging.LogRecord) -> str:
    try:
        return record.getMessage()
    except Exception:
        # Keep logging resilient when message formatting fails.
        return f"{record.msg!s} [log-message-format-error]"


def _extra_fields(record: logging.LogRecord) -> dict[str, object]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if isinstance(key, str) and key not in _LOG_RECORD_RESERVED_FIELDS and not key.startswith("_")
    }


class SensitiveDataFilter(logging.Filter):
    """Best-effort redaction for sensitive values in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.__dict__.get(_REDACTION_FLAG_ATTR):
            return True

        record.msg = redact_message(_safe_record_message(record))
        record.args = ()
        for key, value in _extra_fields(record).items():
            if _is_sensitive_field(key):
                record.__dict__[key] = _REDACTED_VALUE
            else:
                with contextlib.suppress(Exception):
                    record.__dict__[key] = _redact_value(value)
        record.__dict__[_REDACTION_FLAG_ATTR] = True
        return True


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for structured logging output.

    Each log record is a single JSON object on one line.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_message(_safe_record_message(record)),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra = _extra_fields(record)
        if extra:
            log_entry.update(_redact_value(extra))

        return json.dumps(log_entry, default=str)


def resolve_log_level(log_level: str | None = None) -> str:
    """Pick the effective level name.

    Priority: 1) Passed parameter, 2) Environment variable LOG_LEVEL, 3) WARNING
    """
    if log_level is None:
        log_level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)

    if log_level.upper() not in VALID_LOG_LEVELS:
        print(f"Warning: Invalid log level '{log_level}', using {DEFAULT_LOG_LEVEL}", file=sys.stderr)
        return DEFAULT_LOG_LEVEL
    return log_level.upper()


def setup_logging(log_level: str | None = None, log_format: str = "text") -> logging.Logger:
    """Configure console logging on stderr.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format - "text" (default) or "json" for structured logging

    Returns:
        The package logger
    """
    numeric_level = getattr(logging, resolve_log_level(log_level), logging.WARNING)

    # Clear any existing handlers from root logger
    for handler in logging.root.handlers[:]:
        handler.close()
        logging.root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if log_format.lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    handler.setLevel(numeric_level)
    handler.addFilter(SensitiveDataFilter())
    logging.root.addHandler(handler)
    logging.root.setLevel(numeric_level)

    logger = logging.getLogger("fleet_cli")
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logger.debug(f"Logging initialized at level {logging.getLevelName(numeric_level)}")
    return logger
