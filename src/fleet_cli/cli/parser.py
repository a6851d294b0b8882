"""CLI argument parsing."""

from __future__ import annotations

import argparse
import textwrap

from fleet_cli.core.constants import LOG_FORMATS, VALID_LOG_LEVELS
from fleet_cli.core.version import __version__

# Attempt to load argcomplete for shell tab-completion (optional dependency)
_ARGCOMPLETE_AVAILABLE = False
try:
    import argcomplete

    _ARGCOMPLETE_AVAILABLE = True
except ImportError:
    pass  # argcomplete not installed

PROG = "fleet"

DEVICES_SUPPORTED_DESCRIPTION = textwrap.dedent(
    """\
    List the supported device types (like 'raspberrypi3' or 'intel-nuc').

    The --verbose option adds extra columns/fields to the output, including the
    "STATE" column whose values are one of 'beta', 'released' or 'discontinued'.
    However, 'discontinued' device types are only listed if the '--discontinued'
    option is used.

    The --json option is recommended when scripting the output of this command,
    because the JSON format is less likely to change and it better represents data
    types like lists and empty strings (for example, the ALIASES column contains a
    list of zero or more values). The 'jq' utility may be helpful in shell scripts
    (https://stedolan.github.io/jq/manual/).
    """
)

DEVICES_SUPPORTED_EPILOG = textwrap.dedent(
    """\
    Examples:
      fleet devices supported
      fleet devices supported --verbose
      fleet devices supported -vj
    """
)

ENVS_DESCRIPTION = textwrap.dedent(
    """\
    List the environment or config variables of an application or device,
    as selected by the respective command-line options.

    The --config option is used to list "configuration variables" that
    control balena features.

    Service-specific variables are not currently supported. The following
    examples list variables that apply to all services in an app or device.
    """
)

ENVS_EPILOG = textwrap.dedent(
    """\
    Examples:
      fleet envs --application MyApp
      fleet envs --application MyApp --config
      fleet envs --device 7cf02a6
    """
)


def _add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="produce JSON output instead of tabular output",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Fleet management CLI - inspect device types and variables of a balena fleet",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="logging level for messages on stderr (default: LOG_LEVEL env var, else WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="log output format: text (default) or json for structured logging",
    )
    parser.add_argument("--no-color", action="store_true", help="disable colored error output")

    commands = parser.add_subparsers(dest="command", metavar="<command>", required=True)

    # ---- devices ----
    devices = commands.add_parser("devices", help="device related commands")
    devices_commands = devices.add_subparsers(dest="devices_command", metavar="<subcommand>", required=True)
    supported = devices_commands.add_parser(
        "supported",
        help="list the supported device types (like 'raspberrypi3' or 'intel-nuc')",
        description=DEVICES_SUPPORTED_DESCRIPTION,
        epilog=DEVICES_SUPPORTED_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    supported.add_argument(
        "--discontinued",
        action="store_true",
        help='include "discontinued" device types',
    )
    _add_json_flag(supported)
    supported.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="add extra columns in the tabular output (ALIASES, ARCH, STATE)",
    )
    supported.set_defaults(command_name="devices supported")

    # ---- envs ----
    envs = commands.add_parser(
        "envs",
        help="list the environment or config variables of an application or device",
        description=ENVS_DESCRIPTION,
        epilog=ENVS_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    target = envs.add_mutually_exclusive_group()
    target.add_argument("-a", "--application", metavar="APPLICATION", help="application name")
    target.add_argument("-d", "--device", metavar="UUID", help="device UUID")
    envs.add_argument("-c", "--config", action="store_true", help="show config variables")
    _add_json_flag(envs)
    envs.add_argument("-v", "--verbose", action="store_true", help="produce verbose output")
    envs.set_defaults(command_name="envs")

    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])
    """
    parser = build_parser()
    if _ARGCOMPLETE_AVAILABLE:
        argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
