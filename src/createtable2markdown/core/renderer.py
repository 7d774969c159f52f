"""Markdown rendering of table definitions."""

from typing import Iterable, Sequence

from createtable2markdown.models.table import ColumnRow, IndexRow, TableDefinition

COLUMN_HEADER = ["name", "type", "not null", "auto_increment", "default", "comment"]
INDEX_HEADER = ["name", "type", "columns"]


def _table_lines(header: Sequence[str], rows: Iterable[Sequence[str]]) -> list[str]:
    lines = ["|" + "".join(f"{h}|" for h in header)]
    lines.append("|" + "---|" * len(header))
    for row in rows:
        lines.append("|" + "".join(f"{cell}|" for cell in row))
    return lines


def build_output(
    table_name: str, columns: Sequence[ColumnRow], indexes: Sequence[IndexRow]
) -> str:
    """
    Render one table definition block.

    Args:
        table_name: Table name used in both headings
        columns: Column rows in declaration order
        indexes: Index rows in declaration order

    Returns:
        Markdown text ending with a blank line
    """
    lines = [f"{table_name} Table's Definition", ""]
    lines.extend(_table_lines(COLUMN_HEADER, (row.cells() for row in columns)))
    lines.extend(["", f"{table_name} Table's Indexes", ""])
    lines.extend(_table_lines(INDEX_HEADER, (row.cells() for row in indexes)))
    return "\n".join(lines) + "\n\n"


def render_tables(definitions: Iterable[TableDefinition]) -> str:
    """Concatenate definition blocks in order."""
    return "".join(
        build_output(d.name, d.columns, d.indexes) for d in definitions
    )
