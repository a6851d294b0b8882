"""Output module - JSON and table rendering for list commands."""

from fleet_cli.output.formatters import (
    column_label,
    format_as_json,
    project_record,
    project_records,
    render_horizontal,
)

__all__ = [
    "column_label",
    "format_as_json",
    "project_record",
    "project_records",
    "render_horizontal",
]
