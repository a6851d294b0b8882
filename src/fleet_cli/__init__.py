"""
balena-fleet-cli - list supported device types and fleet variables

A small command-line tool that reads device types and application or
device variables through the balena SDK and prints them as tables or JSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fleet_cli.core.lazy import make_getattr

__all__ = ["__version__", "main"]

if TYPE_CHECKING:
    from fleet_cli.cli.main import main
    from fleet_cli.core.version import __version__

__getattr__ = make_getattr(
    __name__,
    {
        "__version__": "fleet_cli.core.version",
        "main": "fleet_cli.cli.main",
    },
)
