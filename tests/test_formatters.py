"""Tests for shared output formatters"""
import json
from dataclasses import dataclass
from enum import Enum

from fleet_cli.output.formatters import (
    column_label,
    format_as_json,
    project_record,
    project_records,
    render_horizontal,
)


class Col(str, Enum):
    ID = "id"
    DISPLAY_NAME = "display_name"
    TAGS = "tags"


@dataclass
class Row:
    id: int
    display_name: str | None = None
    tags: tuple = ()


# ==================== project_record ====================


class TestProjectRecord:
    """Tests for field projection"""

    def test_field_order_follows_fields(self):
        result = project_record(Row(id=1, display_name="a"), [Col.DISPLAY_NAME, Col.ID])
        assert list(result) == ["display_name", "id"]

    def test_none_values_omitted(self):
        assert project_record(Row(id=1), [Col.ID, Col.DISPLAY_NAME]) == {"id": 1}

    def test_reported_none_kept(self):
        @dataclass
        class ReportedRow(Row):
            reported_fields: frozenset = frozenset({"id", "display_name"})

        result = project_record(ReportedRow(id=1), [Col.ID, Col.DISPLAY_NAME, Col.TAGS])
        assert result == {"id": 1, "display_name": None, "tags": []}

    def test_tuples_become_lists(self):
        assert project_record(Row(id=1, tags=("a", "b")), [Col.TAGS]) == {"tags": ["a", "b"]}

    def test_unknown_attribute_omitted(self):
        class Other(str, Enum):
            MISSING = "missing"

        assert project_record(Row(id=1), [Other.MISSING]) == {}

    def test_project_records_keeps_order(self):
        rows = project_records([Row(id=3), Row(id=1), Row(id=2)], [Col.ID])
        assert rows == [{"id": 3}, {"id": 1}, {"id": 2}]


# ==================== format_as_json ====================


class TestFormatAsJson:
    """Tests for JSON output"""

    def test_four_space_indent(self):
        assert format_as_json([{"a": 1}]) == '[\n    {\n        "a": 1\n    }\n]'

    def test_empty_list(self):
        assert format_as_json([]) == "[]"

    def test_unicode_preserved(self):
        result = format_as_json([{"name": "Données"}])
        assert "Données" in result
        assert json.loads(result)[0]["name"] == "Données"


# ==================== render_horizontal ====================


class TestRenderHorizontal:
    """Tests for the horizontal table renderer"""

    def test_column_labels(self):
        assert column_label(Col.DISPLAY_NAME) == "DISPLAY NAME"
        assert column_label("id") == "ID"

    def test_basic_table(self):
        rows = [{"id": 1, "display_name": "alpha"}, {"id": 22, "display_name": "b"}]
        output = render_horizontal(rows, [Col.ID, Col.DISPLAY_NAME])
        assert output == "ID  DISPLAY NAME\n1   alpha\n22  b"

    def test_column_width_adapts_to_values(self):
        rows = [{"id": "a-very-long-identifier", "display_name": "x"}]
        lines = render_horizontal(rows, [Col.ID, Col.DISPLAY_NAME]).splitlines()
        assert lines[0].index("DISPLAY NAME") == len("a-very-long-identifier") + 2
        assert lines[1].index("x") == lines[0].index("DISPLAY NAME")

    def test_list_cells_joined(self):
        output = render_horizontal([{"tags": ["a", "b"]}], [Col.TAGS])
        assert output.splitlines()[1] == "a, b"

    def test_missing_cells_blank(self):
        output = render_horizontal([{"id": 1}], [Col.ID, Col.DISPLAY_NAME])
        assert output.splitlines()[1] == "1"

    def test_no_rows_header_only(self):
        assert render_horizontal([], [Col.ID]) == "ID"

    def test_no_trailing_whitespace(self):
        output = render_horizontal([{"id": 1, "display_name": ""}], [Col.ID, Col.DISPLAY_NAME])
        assert all(line == line.rstrip() for line in output.splitlines())
