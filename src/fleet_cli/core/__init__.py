"""Core module - foundation components with no SDK dependency.

Version, exceptions, client settings and console colors.
"""

from fleet_cli.core.colors import ConsoleColors
from fleet_cli.core.exceptions import (
    APIError,
    ConfigurationError,
    ExpectedError,
    FleetCLIError,
    NotLoggedInError,
)
from fleet_cli.core.settings import ClientSettings, resolve_client_settings
from fleet_cli.core.version import __version__

__all__ = [
    "APIError",
    "ClientSettings",
    "ConfigurationError",
    "ConsoleColors",
    "ExpectedError",
    "FleetCLIError",
    "NotLoggedInError",
    "__version__",
    "resolve_client_settings",
]
