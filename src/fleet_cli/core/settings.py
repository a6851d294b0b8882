"""Client settings resolution for the fleet CLI."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any

from dotenv import find_dotenv, load_dotenv

from fleet_cli.core.constants import ENV_VAR_MAPPING
from fleet_cli.core.exceptions import ConfigurationError

_HOST_PATTERN = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9.-]*[A-Za-z0-9])?(?::\d+)?$")


def normalize_setting_value(value: Any) -> str:
    """Normalize a setting value consistently across all sources.

    Strips whitespace and surrounding quotes (common in .env files).
    """
    if value is None:
        return ""
    s = str(value).strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in {'"', "'"}:
        s = s[1:-1].strip()
    return s


@dataclass
class ClientSettings:
    """Settings used to build the SDK client.

    Attributes:
        api_key: Token the SDK logs in with (None = use the persisted session)
        balena_host: API host name, e.g. "balena-cloud.com" (None = SDK default)
        data_directory: SDK data directory (None = SDK default)
        sources: Where each non-empty setting came from, for debug output
    """

    api_key: str | None = None
    balena_host: str | None = None
    data_directory: str | None = None
    sources: dict[str, str] = field(default_factory=dict)

    def sdk_settings(self) -> dict[str, str]:
        """Settings dict accepted by the SDK constructor (unset keys omitted)."""
        settings = {}
        if self.balena_host:
            settings["balena_host"] = self.balena_host
        if self.data_directory:
            settings["data_directory"] = self.data_directory
        return settings

    def __repr__(self) -> str:
        masked = "****" if self.api_key else None
        return (
            f"ClientSettings(api_key={masked!r}, balena_host={self.balena_host!r}, "
            f"data_directory={self.data_directory!r})"
        )


def _bootstrap_dotenv(logger: logging.Logger) -> None:
    """Load .env variables without overriding the real environment."""
    try:
        if load_dotenv(find_dotenv(usecwd=True)):
            logger.debug(".env file found and loaded")
        else:
            logger.debug(".env file not found")
    except OSError as e:
        logger.debug(f"Failed to load .env via python-dotenv: {e}")


def _from_environment(setting: str) -> tuple[str, str] | None:
    for env_var in ENV_VAR_MAPPING[setting]:
        value = normalize_setting_value(os.environ.get(env_var))
        if value:
            return value, env_var
    return None


def validate_host(host: str) -> str:
    """Check that an API host is a bare host name.

    Raises:
        ConfigurationError: If the value carries a scheme, path or spaces
    """
    if not _HOST_PATTERN.match(host):
        raise ConfigurationError(
            f"Invalid API host '{host}'",
            field="balena_host",
            details="expected a bare host name such as 'balena-cloud.com' (no scheme or path)",
        )
    return host


def resolve_client_settings(
    api_key: str | None = None,
    balena_host: str | None = None,
    data_directory: str | None = None,
    logger: logging.Logger | None = None,
) -> ClientSettings:
    """Resolve client settings.

    Priority order:
        1. Explicit arguments
        2. Environment variables (see ENV_VAR_MAPPING)
        3. .env file in the working directory
        4. SDK defaults (setting left as None)

    Raises:
        ConfigurationError: If the resolved host is malformed
    """
    logger = logger or logging.getLogger(__name__)
    _bootstrap_dotenv(logger)

    explicit = {"api_key": api_key, "balena_host": balena_host, "data_directory": data_directory}
    resolved: dict[str, str | None] = {}
    sources: dict[str, str] = {}
    for setting, value in explicit.items():
        value = normalize_setting_value(value)
        if value:
            resolved[setting] = value
            sources[setting] = "argument"
            continue
        found = _from_environment(setting)
        if found:
            resolved[setting], sources[setting] = found
        else:
            resolved[setting] = None

    if resolved["balena_host"]:
        validate_host(resolved["balena_host"])

    settings = ClientSettings(sources=sources, **resolved)
    logger.debug(f"Resolved client settings: {settings!r} (sources: {sources})")
    return settings
