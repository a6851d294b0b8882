"""CLI command handlers.

Each handler builds the complete output string; ``run_command`` prints it
and turns failures into a single error line on stderr.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from fleet_cli.api.client import FleetClient, initialize_client
from fleet_cli.core.colors import ConsoleColors
from fleet_cli.core.exceptions import ExpectedError, FleetCLIError
from fleet_cli.devices.supported import SupportedDevicesOptions, format_supported_device_types
from fleet_cli.envs.listing import EnvsOptions, fetch_variables, format_variables

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], FleetClient]


def devices_supported(options: SupportedDevicesOptions, client_factory: ClientFactory | None = None) -> str:
    """List the supported device types."""
    client = (client_factory or initialize_client)()
    device_types = client.list_device_types()
    logger.info(f"Fetched {len(device_types)} device type(s)")
    return format_supported_device_types(device_types, options)


def list_envs(options: EnvsOptions, client_factory: ClientFactory | None = None) -> str:
    """List the environment or config variables of an application or device.

    Raises:
        ExpectedError: If no target was given (before any client is created)
            or if the target has no variables
        NotLoggedInError: If the SDK session is not authenticated
    """
    target = options.require_target()
    client = (client_factory or initialize_client)()
    client.ensure_logged_in()
    variables = fetch_variables(client, target, options.kind)
    return format_variables(variables, options.json)


def _print_error(message: str) -> None:
    print(ConsoleColors.error(f"ERROR: {message}"), file=sys.stderr)


def run_command(command_name: str, action: Callable[[], str]) -> bool:
    """Run a command handler, print its output and report failures.

    Output is printed only after the handler has produced all of it, so a
    failure never leaves partial results on stdout.

    Returns:
        True if successful, False otherwise.
    """
    try:
        output = action()
    except ExpectedError as e:
        logger.debug(f"{command_name}: {type(e).__name__}: {e}")
        _print_error(str(e))
        return False
    except FleetCLIError as e:
        logger.debug(f"{command_name} failed", exc_info=True)
        _print_error(str(e))
        return False
    except Exception as e:
        logger.debug(f"{command_name} failed with an unexpected error", exc_info=True)
        _print_error(f"{type(e).__name__}: {e}")
        return False

    print(output)
    return True
