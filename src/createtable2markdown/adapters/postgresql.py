"""PostgreSQL adapter."""

from typing import Optional

from sqlglot import exp

from createtable2markdown.adapters.base import BaseAdapter

SERIAL_TYPES = {"SERIAL", "SMALLSERIAL", "BIGSERIAL"}


class PostgresAdapter(BaseAdapter):
    """PostgreSQL adapter with identity and serial column support."""

    @property
    def dialect(self) -> str:
        return "postgres"

    def primary_key_name(
        self, table_name: str, constraint_name: Optional[str]
    ) -> str:
        """Constraint name when given, otherwise PostgreSQL's <table>_pkey."""
        return constraint_name or f"{table_name}_pkey"

    def unnamed_index_name(
        self, table_name: str, kind: str, columns: list[str]
    ) -> str:
        """PostgreSQL's <table>_<columns>_key naming for anonymous constraints."""
        return "_".join([table_name, *columns, "key"])

    def is_auto_increment(self, column: exp.ColumnDef) -> bool:
        """Identity columns and serial pseudo-types generate their values."""
        dtype = column.args.get("kind")
        if isinstance(dtype, exp.DataType):
            if getattr(dtype.this, "name", "") in SERIAL_TYPES:
                return True

        for constraint in column.args.get("constraints") or []:
            if isinstance(
                constraint.args.get("kind"), exp.GeneratedAsIdentityColumnConstraint
            ):
                return True
        return False
