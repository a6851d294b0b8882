"""SDK client initialization and read operations for the fleet CLI."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from balena import Balena

from fleet_cli.core.constants import BANNER_WIDTH, LOGIN_HINT
from fleet_cli.core.exceptions import APIError, ConfigurationError, FleetCLIError, NotLoggedInError
from fleet_cli.core.settings import ClientSettings, resolve_client_settings
from fleet_cli.devices.models import DeviceType
from fleet_cli.envs.models import EnvironmentVariable

T = TypeVar("T")


class FleetClient:
    """Read-only facade over a ``balena.Balena`` SDK instance.

    Every remote call goes through ``_call`` so SDK and network failures
    surface as APIError naming the operation. Errors are never retried.
    """

    def __init__(self, sdk: Any, logger: logging.Logger | None = None):
        self.sdk = sdk
        self.logger = logger or logging.getLogger(__name__)

    def _call(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        self.logger.debug(f"API call: {operation}")
        try:
            return func(*args)
        except FleetCLIError:
            raise
        except Exception as e:
            self.logger.debug(f"{operation} failed", exc_info=True)
            raise APIError(
                "Request failed",
                operation=operation,
                status_code=getattr(e, "status_code", None),
                details=str(e) or type(e).__name__,
                original_error=e,
            ) from e

    # ==================== AUTHENTICATION ====================

    def is_logged_in(self) -> bool:
        return bool(self._call("check login status", self.sdk.auth.is_logged_in))

    def ensure_logged_in(self) -> None:
        """Fail fast when the SDK session is not authenticated.

        Raises:
            NotLoggedInError: If there is no valid session or API key
        """
        if not self.is_logged_in():
            raise NotLoggedInError(details=LOGIN_HINT)

    def login_with_api_key(self, api_key: str) -> None:
        """Authenticate the SDK session with an API key or session token.

        Raises:
            ConfigurationError: If the SDK rejects the key
        """
        try:
            self.sdk.auth.login_with_token(api_key)
        except Exception as e:
            raise ConfigurationError(
                "Failed to log in with the configured API key", field="api_key", details=str(e)
            ) from e
        self.logger.debug("Logged in with API key")

    # ==================== DEVICE TYPES ====================

    def list_device_types(self) -> list[DeviceType]:
        raw = self._call("list device types", self.sdk.models.config.get_device_types)
        return [DeviceType.from_api(item) for item in raw or []]

    # ==================== VARIABLES ====================

    def _variables(self, operation: str, func: Callable[[str], Any], identifier: str) -> list[EnvironmentVariable]:
        raw = self._call(operation, func, identifier)
        return [EnvironmentVariable.from_api(item) for item in raw or []]

    def get_application_env_vars(self, slug: str) -> list[EnvironmentVariable]:
        return self._variables(
            "fetch application environment variables",
            self.sdk.models.application.env_var.get_all_by_application,
            slug,
        )

    def get_application_config_vars(self, slug: str) -> list[EnvironmentVariable]:
        return self._variables(
            "fetch application config variables",
            self.sdk.models.application.config_var.get_all_by_application,
            slug,
        )

    def get_device_env_vars(self, uuid: str) -> list[EnvironmentVariable]:
        return self._variables(
            "fetch device environment variables",
            self.sdk.models.device.env_var.get_all_by_device,
            uuid,
        )

    def get_device_config_vars(self, uuid: str) -> list[EnvironmentVariable]:
        return self._variables(
            "fetch device config variables",
            self.sdk.models.device.config_var.get_all_by_device,
            uuid,
        )


def initialize_client(settings: ClientSettings | None = None, logger: logging.Logger | None = None) -> FleetClient:
    """Create the SDK client.

    Resolves settings (arguments > environment > .env) when none are given,
    builds the SDK and, if an API key is configured, logs in with it.
    Otherwise the session persisted by a previous ``balena login`` is used.

    Raises:
        ConfigurationError: If settings are invalid or the API key is rejected
    """
    logger = logger or logging.getLogger(__name__)
    logger.debug("=" * BANNER_WIDTH)
    logger.debug("INITIALIZING SDK CLIENT")
    logger.debug("=" * BANNER_WIDTH)

    if settings is None:
        settings = resolve_client_settings(logger=logger)

    sdk_settings = settings.sdk_settings()
    sdk = Balena(sdk_settings) if sdk_settings else Balena()
    client = FleetClient(sdk, logger=logger)

    if settings.api_key:
        logger.debug(f"Using API key from {settings.sources.get('api_key', 'unknown source')}")
        client.login_with_api_key(settings.api_key)
    else:
        logger.debug("No API key configured, relying on the stored SDK session")
    return client
