"""Supported device types listing.

Filters, reshapes, projects and sorts device type records for the
``devices supported`` command.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from fleet_cli.core.constants import LIST_CELL_SEPARATOR
from fleet_cli.devices.models import BASE_FIELDS, VERBOSE_FIELDS, DeviceType, DeviceTypeField
from fleet_cli.output.formatters import format_as_json, project_records, render_horizontal

logger = logging.getLogger(__name__)


@dataclass
class SupportedDevicesOptions:
    """Options of the ``devices supported`` command.

    Attributes:
        discontinued: Include device types in the DISCONTINUED state
        json: Produce JSON instead of a table
        verbose: Add the ALIASES, ARCH and STATE columns
    """

    discontinued: bool = False
    json: bool = False
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> SupportedDevicesOptions:
        return cls(
            discontinued=getattr(args, "discontinued", False),
            json=getattr(args, "json", False),
            verbose=getattr(args, "verbose", False),
        )


def select_fields(verbose: bool) -> list[DeviceTypeField]:
    """Output fields: [slug, name], with aliases/arch/state spliced in after slug."""
    fields = list(BASE_FIELDS)
    if verbose:
        fields[1:1] = VERBOSE_FIELDS
    return fields


def filter_discontinued(device_types: Iterable[DeviceType], include_discontinued: bool) -> list[DeviceType]:
    if include_discontinued:
        return list(device_types)
    return [dt for dt in device_types if not dt.is_discontinued]


def reshape_aliases(device_type: DeviceType, as_json: bool) -> DeviceType:
    """Drop the self-referencing alias and prepare the rest for display.

    JSON keeps the alias list; tables get one comma-joined entry so the
    column shows a single readable cell. Duplicate aliases other than the
    slug itself are passed through unchanged.
    """
    aliases = device_type.distinct_aliases()
    if aliases and not as_json:
        aliases = [LIST_CELL_SEPARATOR.join(aliases)]
    return replace(device_type, aliases=tuple(aliases))


def _sort_value(value: Any) -> tuple[int, str]:
    # Missing values sort after present ones
    if value is None:
        return (1, "")
    if isinstance(value, (list, tuple)):
        return (0, LIST_CELL_SEPARATOR.join(str(item) for item in value))
    return (0, str(value))


def sort_rows(rows: list[dict[str, Any]], fields: list[DeviceTypeField]) -> list[dict[str, Any]]:
    """Sort rows ascending by each field in turn."""
    return sorted(rows, key=lambda row: tuple(_sort_value(row.get(field.value)) for field in fields))


def build_rows(device_types: Iterable[DeviceType], options: SupportedDevicesOptions) -> tuple[
    list[dict[str, Any]], list[DeviceTypeField]
]:
    """Run the filter → reshape → project → sort pipeline.

    Returns:
        Tuple of (rows, fields) where rows are plain dicts keyed by field name.
    """
    selected = filter_discontinued(device_types, options.discontinued)
    fields = select_fields(options.verbose)
    if options.verbose:
        selected = [reshape_aliases(dt, options.json) for dt in selected]
    rows = sort_rows(project_records(selected, fields), fields)
    logger.debug(f"Prepared {len(rows)} device type row(s) with fields {[f.value for f in fields]}")
    return rows, fields


def format_supported_device_types(device_types: Iterable[DeviceType], options: SupportedDevicesOptions) -> str:
    """Produce the complete command output as a single string."""
    rows, fields = build_rows(device_types, options)
    if options.json:
        return format_as_json(rows)
    return render_horizontal(rows, fields)
