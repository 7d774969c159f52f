"""Core conversion pipeline."""

from .converter import convert, read_input, write_output
from .formatter import EmptyIndexError, column_to_row, index_to_row, to_definition
from .parser import StatementParser, split_statements
from .renderer import build_output, render_tables

__all__ = [
    "StatementParser",
    "split_statements",
    "EmptyIndexError",
    "column_to_row",
    "index_to_row",
    "to_definition",
    "build_output",
    "render_tables",
    "convert",
    "read_input",
    "write_output",
]
