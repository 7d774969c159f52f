"""Unit Tests for Column and Index Formatting

Tests the projection of parsed specs into display rows:
- Type cell composition
- Fixed row widths
- Empty index rejection
"""

import pytest

from createtable2markdown.core.formatter import (
    EmptyIndexError,
    column_to_row,
    index_to_row,
    render_type,
    to_definition,
)
from createtable2markdown.models.table import ColumnSpec, IndexSpec, TableSpec


class TestRenderType:
    """Test the type cell."""

    def test_length_and_unsigned(self):
        """Test keyword, size and unsigned marker."""
        spec = ColumnSpec(name="id", type_name="int", length="10", unsigned=True)
        assert render_type(spec) == "int(10) unsigned"

    def test_keyword_only(self):
        """Test a type with no arguments."""
        assert render_type(ColumnSpec(name="body", type_name="text")) == "text"

    def test_enum_values(self):
        """Test that enum members are joined with comma and space."""
        spec = ColumnSpec(name="state", type_name="enum", enum_values=["'on'", "'off'"])
        assert render_type(spec) == "enum('on', 'off')"

    def test_charset_and_collate_are_appended_verbatim(self):
        """Test that character set and collation follow without separators."""
        spec = ColumnSpec(
            name="title",
            type_name="varchar",
            length="10",
            charset="utf8mb4",
            collate="utf8mb4_bin",
        )
        assert render_type(spec) == "varchar(10)utf8mb4utf8mb4_bin"

    def test_precision_and_scale(self):
        """Test multi-argument sizes."""
        spec = ColumnSpec(name="price", type_name="decimal", length="10,2")
        assert render_type(spec) == "decimal(10,2)"


class TestColumnToRow:
    """Test column rows."""

    def test_auto_increment_primary_column(self):
        """Test the canonical id column."""
        spec = ColumnSpec(
            name="id",
            type_name="int",
            length="10",
            unsigned=True,
            not_null=True,
            auto_increment=True,
        )
        row = column_to_row(spec)
        assert row.cells() == [
            "id",
            "int(10) unsigned",
            "not null",
            "auto_increment",
            "",
            "",
        ]

    def test_default_and_comment(self):
        """Test that default and comment text is copied as is."""
        spec = ColumnSpec(
            name="status",
            type_name="tinyint",
            length="1",
            default="0",
            comment="0: inactive, 1: active",
        )
        row = column_to_row(spec)
        assert row.default == "0"
        assert row.comment == "0: inactive, 1: active"
        assert row.not_null == ""
        assert row.auto_increment == ""

    def test_empty_default_is_kept(self):
        """Test that an empty-string default still renders empty."""
        row = column_to_row(ColumnSpec(name="note", type_name="varchar", default=""))
        assert row.default == ""

    def test_row_width_is_fixed(self):
        """Test that a bare column still produces six cells."""
        assert len(column_to_row(ColumnSpec(name="x")).cells()) == 6

    def test_formatting_is_idempotent(self):
        """Test that formatting twice gives equal rows."""
        spec = ColumnSpec(name="aaa", type_name="int", length="10", comment="a")
        assert column_to_row(spec) == column_to_row(spec)


class TestIndexToRow:
    """Test index rows."""

    def test_primary_key(self):
        """Test a single-column primary key."""
        row = index_to_row(IndexSpec(name="PRIMARY", kind="primary key", columns=["id"]))
        assert row.cells() == ["PRIMARY", "primary key", "id"]

    def test_composite_key_keeps_order(self):
        """Test that member columns are joined in declared order."""
        row = index_to_row(IndexSpec(name="bbb_ccc", kind="key", columns=["bbb", "ccc"]))
        assert row.cells() == ["bbb_ccc", "key", "bbb, ccc"]

    def test_empty_index_is_rejected(self):
        """Test that an index without columns raises."""
        with pytest.raises(EmptyIndexError) as exc_info:
            index_to_row(IndexSpec(name="broken", kind="key", columns=[]))

        assert exc_info.value.index_name == "broken"
        assert isinstance(exc_info.value, ValueError)

    def test_formatting_is_idempotent(self):
        """Test that formatting twice gives equal rows."""
        spec = IndexSpec(name="aaa", kind="unique key", columns=["aaa"])
        assert index_to_row(spec) == index_to_row(spec)
        assert len(index_to_row(spec).cells()) == 3


class TestToDefinition:
    """Test whole-table projection."""

    def test_rows_follow_declaration_order(self):
        """Test that columns and indexes keep their order."""
        table = TableSpec(
            name="foo",
            columns=[
                ColumnSpec(name="id", type_name="int"),
                ColumnSpec(name="aaa", type_name="int"),
            ],
            indexes=[
                IndexSpec(name="PRIMARY", kind="primary key", columns=["id"]),
                IndexSpec(name="aaa", kind="unique key", columns=["aaa"]),
            ],
        )

        definition = to_definition(table)

        assert definition.name == "foo"
        assert [r.name for r in definition.columns] == ["id", "aaa"]
        assert [r.name for r in definition.indexes] == ["PRIMARY", "aaa"]
