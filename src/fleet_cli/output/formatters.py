"""Shared output formatters for list commands.

Records are first projected onto an explicit list of field enums, then
rendered either as indented JSON or as a horizontal text table.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any

from fleet_cli.core.constants import JSON_INDENT, LIST_CELL_SEPARATOR, TABLE_COLUMN_GAP


def _field_name(field: Enum | str) -> str:
    return field.value if isinstance(field, Enum) else field


def project_record(record: Any, fields: Sequence[Enum]) -> dict[str, Any]:
    """Restrict a record to the given fields, in field order.

    A None value is kept (as JSON null) only when the record lists the
    field in ``reported_fields``; otherwise the field was never sent and
    is left out. Tuples become lists so the result serializes as JSON
    arrays.
    """
    reported = getattr(record, "reported_fields", frozenset())
    projected: dict[str, Any] = {}
    for field in fields:
        name = _field_name(field)
        value = getattr(record, name, None)
        if value is None and name not in reported:
            continue
        if isinstance(value, tuple):
            value = list(value)
        elif isinstance(value, Enum):
            value = value.value
        projected[name] = value
    return projected


def project_records(records: Iterable[Any], fields: Sequence[Enum]) -> list[dict[str, Any]]:
    """Project every record, preserving input order."""
    return [project_record(record, fields) for record in records]


def format_as_json(rows: list[dict[str, Any]]) -> str:
    """Format projected rows as a JSON array with 4-space indentation."""
    return json.dumps(rows, indent=JSON_INDENT, ensure_ascii=False)


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return LIST_CELL_SEPARATOR.join(str(item) for item in value)
    return str(value)


def column_label(field: Enum | str) -> str:
    """Column header for a field: upper-cased, underscores as spaces."""
    return _field_name(field).replace("_", " ").upper()


def render_horizontal(rows: list[dict[str, Any]], fields: Sequence[Enum | str]) -> str:
    """Render rows as an aligned table, one column per field.

    Args:
        rows: Projected rows (dicts keyed by field name).
        fields: Column order.

    Returns:
        Table text without a trailing newline. With no rows only the
        header line is produced.
    """
    names = [_field_name(field) for field in fields]
    labels = [column_label(field) for field in fields]
    cells = [[_format_cell(row.get(name)) for name in names] for row in rows]
    widths = [
        max(len(label), max((len(line[index]) for line in cells), default=0))
        for index, label in enumerate(labels)
    ]
    gap = " " * TABLE_COLUMN_GAP

    def _line(values: list[str]) -> str:
        return gap.join(f"{value:<{width}}" for value, width in zip(values, widths, strict=True)).rstrip()

    lines = [_line(labels)]
    lines.extend(_line(line) for line in cells)
    return "\n".join(lines)
