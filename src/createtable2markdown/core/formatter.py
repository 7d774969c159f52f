"""Projection of parsed column and index specs into display rows."""

from createtable2markdown.models.table import (
    ColumnRow,
    ColumnSpec,
    IndexRow,
    IndexSpec,
    TableDefinition,
    TableSpec,
)


class EmptyIndexError(ValueError):
    """Raised when an index definition has no member columns."""

    def __init__(self, index_name: str):
        self.index_name = index_name
        super().__init__(f"Index {index_name!r} has no columns")


def render_type(spec: ColumnSpec) -> str:
    """
    Render the type cell of a column.

    Keyword, then enum members, size, the unsigned marker and finally the
    character set and collation, the last two without any separator.

    Args:
        spec: Parsed column

    Returns:
        Type text, e.g. ``int(10) unsigned``
    """
    enum = f"({', '.join(spec.enum_values)})" if spec.enum_values else ""
    length = f"({spec.length})" if spec.length else ""
    signed = " unsigned" if spec.unsigned else ""
    chartype = (spec.charset or "") + (spec.collate or "")
    return f"{spec.type_name}{enum}{length}{signed}{chartype}"


def column_to_row(spec: ColumnSpec) -> ColumnRow:
    """Map a parsed column to its six-cell row."""
    return ColumnRow(
        name=spec.name,
        type=render_type(spec),
        not_null="not null" if spec.not_null else "",
        auto_increment="auto_increment" if spec.auto_increment else "",
        default=spec.default if spec.default is not None else "",
        comment=spec.comment if spec.comment is not None else "",
    )


def index_to_row(spec: IndexSpec) -> IndexRow:
    """
    Map a parsed index to its three-cell row.

    Raises:
        EmptyIndexError: If the index has no columns
    """
    if not spec.columns:
        raise EmptyIndexError(spec.name)

    return IndexRow(name=spec.name, type=spec.kind, columns=", ".join(spec.columns))


def to_definition(table: TableSpec) -> TableDefinition:
    """Map a parsed table to its rows, keeping declaration order."""
    return TableDefinition(
        name=table.name,
        columns=[column_to_row(col) for col in table.columns],
        indexes=[index_to_row(idx) for idx in table.indexes],
    )
