"""CLI entrypoint."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from fleet_cli.cli.commands import devices_supported, list_envs, run_command
from fleet_cli.cli.parser import parse_arguments
from fleet_cli.core.colors import ConsoleColors
from fleet_cli.core.constants import EXIT_ERROR, EXIT_INTERRUPTED, EXIT_SUCCESS
from fleet_cli.core.logging import setup_logging
from fleet_cli.devices.supported import SupportedDevicesOptions
from fleet_cli.envs.listing import EnvsOptions


def _devices_supported(args: argparse.Namespace) -> str:
    return devices_supported(SupportedDevicesOptions.from_args(args))


def _envs(args: argparse.Namespace) -> str:
    return list_envs(EnvsOptions.from_args(args))


COMMANDS: dict[str, Callable[[argparse.Namespace], str]] = {
    "devices supported": _devices_supported,
    "envs": _envs,
}


def _effective_log_level(args: argparse.Namespace) -> str | None:
    if args.log_level:
        return args.log_level
    if args.command_name == "envs" and getattr(args, "verbose", False):
        return "DEBUG"
    return None


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI"""
    args = parse_arguments(argv)

    # Configure global color policy for all ConsoleColors call sites.
    ConsoleColors.configure(no_color=args.no_color)
    logger = setup_logging(log_level=_effective_log_level(args), log_format=args.log_format)
    logger.debug(f"Running command: {args.command_name}")

    handler = COMMANDS[args.command_name]
    try:
        success = run_command(args.command_name, lambda: handler(args))
    except KeyboardInterrupt:
        print(ConsoleColors.warning("Operation cancelled."), file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)

    sys.exit(EXIT_SUCCESS if success else EXIT_ERROR)
