"""CLI module - Command-line interface components."""

__all__ = ["devices_supported", "list_envs", "parse_arguments", "run_command"]

from fleet_cli.core.lazy import make_getattr

__getattr__ = make_getattr(
    __name__,
    {
        "devices_supported": "fleet_cli.cli.commands",
        "list_envs": "fleet_cli.cli.commands",
        "run_command": "fleet_cli.cli.commands",
        "parse_arguments": "fleet_cli.cli.parser",
    },
)
