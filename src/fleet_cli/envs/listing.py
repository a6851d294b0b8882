"""Environment and config variable listing for the ``envs`` command."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fleet_cli.core.constants import MISSING_TARGET_MESSAGE, NO_VARIABLES_MESSAGE
from fleet_cli.core.exceptions import ExpectedError
from fleet_cli.envs.models import (
    ENV_VAR_FIELDS,
    EnvironmentVariable,
    VariableKind,
    VariableScope,
    VariableTarget,
    target_from_selectors,
)
from fleet_cli.output.formatters import format_as_json, project_records, render_horizontal

if TYPE_CHECKING:
    from fleet_cli.api.client import FleetClient

logger = logging.getLogger(__name__)

# Client method used for each (scope, kind) pair
FETCHERS: dict[tuple[VariableScope, VariableKind], str] = {
    (VariableScope.APPLICATION, VariableKind.ENVIRONMENT): "get_application_env_vars",
    (VariableScope.APPLICATION, VariableKind.CONFIG): "get_application_config_vars",
    (VariableScope.DEVICE, VariableKind.ENVIRONMENT): "get_device_env_vars",
    (VariableScope.DEVICE, VariableKind.CONFIG): "get_device_config_vars",
}


@dataclass
class EnvsOptions:
    """Options of the ``envs`` command.

    Attributes:
        target: Application or device whose variables are listed (None if
            neither selector was given)
        kind: Environment variables or config variables (--config)
        json: Produce JSON instead of a table
        verbose: Debug logging for this run
    """

    target: VariableTarget | None = None
    kind: VariableKind = VariableKind.ENVIRONMENT
    json: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> EnvsOptions:
        return cls(
            target=target_from_selectors(getattr(args, "application", None), getattr(args, "device", None)),
            kind=VariableKind.CONFIG if getattr(args, "config", False) else VariableKind.ENVIRONMENT,
            json=getattr(args, "json", False),
            verbose=getattr(args, "verbose", False),
        )

    def require_target(self) -> VariableTarget:
        """Return the target, or fail before any network call if none was given."""
        if self.target is None:
            raise ExpectedError(MISSING_TARGET_MESSAGE)
        return self.target


def fetch_variables(client: FleetClient, target: VariableTarget, kind: VariableKind) -> list[EnvironmentVariable]:
    """Fetch the variables of a target through the matching client call.

    Raises:
        ExpectedError: If the target has no variables of that kind
    """
    fetcher = getattr(client, FETCHERS[(target.scope, kind)])
    logger.info(f"Fetching {kind.value} variables of {target.describe()}")
    variables = fetcher(target.identifier)
    if not variables:
        raise ExpectedError(NO_VARIABLES_MESSAGE)
    logger.debug(f"Fetched {len(variables)} variable(s)")
    return variables


def format_variables(variables: list[EnvironmentVariable], as_json: bool) -> str:
    """Render variables in fetch order (no sorting)."""
    rows = project_records(variables, ENV_VAR_FIELDS)
    if as_json:
        return format_as_json(rows)
    return render_horizontal(rows, ENV_VAR_FIELDS)
