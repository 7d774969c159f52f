"""MySQL adapter, the reference dialect for CREATE TABLE documentation."""

from typing import Optional

from sqlglot import exp

from createtable2markdown.adapters.base import BaseAdapter

# sqlglot folds UNSIGNED into dedicated type members
UNSIGNED_TYPES = {
    "UTINYINT": "tinyint",
    "USMALLINT": "smallint",
    "UMEDIUMINT": "mediumint",
    "UINT": "int",
    "UBIGINT": "bigint",
    "UDECIMAL": "decimal",
    "UDOUBLE": "double",
}


class MySQLAdapter(BaseAdapter):
    """MySQL adapter."""

    @property
    def dialect(self) -> str:
        return "mysql"

    def primary_key_name(
        self, table_name: str, constraint_name: Optional[str]
    ) -> str:
        """MySQL always names the primary key PRIMARY."""
        return "PRIMARY"

    def unnamed_index_name(
        self, table_name: str, kind: str, columns: list[str]
    ) -> str:
        """MySQL names an anonymous index after its first column."""
        return columns[0] if columns else ""

    def type_keyword(self, dtype: exp.DataType) -> tuple[str, bool]:
        """Split unsigned integer types back into keyword and flag."""
        type_name = getattr(dtype.this, "name", "")
        if type_name in UNSIGNED_TYPES:
            return UNSIGNED_TYPES[type_name], True

        keyword, unsigned = super().type_keyword(dtype)
        if dtype.sql(dialect=self.dialect).upper().endswith(" UNSIGNED"):
            return keyword.removesuffix(" unsigned"), True
        return keyword, unsigned
