"""Statement splitting and CREATE TABLE extraction using sqlglot."""

import logging
import re
from typing import TYPE_CHECKING, Optional

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

from createtable2markdown.models.table import TableSpec

if TYPE_CHECKING:
    from createtable2markdown.adapters.base import BaseAdapter

logger = logging.getLogger(__name__)

STATEMENT_TERMINATOR = ";"

CREATE_TABLE_PATTERN = re.compile(
    r"^\s*CREATE\s+(?:TEMPORARY\s+)?TABLE\b", re.IGNORECASE
)


def split_statements(sql: str) -> list[str]:
    """
    Split SQL text into statement fragments.

    The split is naive: a semicolon inside a string literal or comment also
    ends a fragment.

    Args:
        sql: Raw SQL text

    Returns:
        Fragments in input order, including blank ones
    """
    return sql.split(STATEMENT_TERMINATOR)


class StatementParser:
    """Parses SQL text into CREATE TABLE specs."""

    def __init__(self, adapter: "BaseAdapter"):
        """
        Initialize statement parser.

        Args:
            adapter: Dialect adapter that reads the parsed statements
        """
        self.adapter = adapter

    def parse(self, sql: str) -> list[TableSpec]:
        """
        Parse every CREATE TABLE statement in the text.

        Args:
            sql: Raw SQL text with zero or more statements

        Returns:
            Table specs in input order
        """
        tables = []
        for fragment in split_statements(sql):
            table = self.parse_create_table(fragment)
            if table is not None:
                tables.append(table)
        return tables

    def parse_create_table(self, fragment: str) -> Optional[TableSpec]:
        """
        Parse one statement fragment.

        Args:
            fragment: SQL text of a single statement

        Returns:
            Table spec, or None when the fragment is not a parseable
            CREATE TABLE statement with a column list
        """
        if not fragment.strip():
            return None

        try:
            statements = sqlglot.parse(fragment, read=self.adapter.dialect)
        except SqlglotError as e:
            if CREATE_TABLE_PATTERN.match(fragment):
                logger.warning(f"Skipping CREATE TABLE the parser can not read: {e}")
            else:
                logger.debug(f"Can not parse query: {e}")
            return None

        statement = next((s for s in statements if s is not None), None)
        if statement is None:
            logger.debug("Query holds no statement")
            return None

        if not isinstance(statement, exp.Create):
            logger.debug(f"Query is not DDL: {statement.key}")
            return None

        kind = str(statement.args.get("kind") or "").upper()
        if kind != "TABLE" or not isinstance(statement.this, exp.Schema):
            logger.debug(f"Query is not CREATE TABLE: CREATE {kind}")
            return None

        table = self.adapter.table_spec(statement.this, fragment)
        logger.debug(
            f"Parsed table {table.name} "
            f"({table.column_count} columns, {table.index_count} indexes)"
        )
        return table
