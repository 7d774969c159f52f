"""Base adapter abstract class for dialect-specific DDL extraction."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlglot import exp

from createtable2markdown.adapters.source import DefinitionSource, definition_sources
from createtable2markdown.models.table import ColumnSpec, IndexSpec, TableSpec

logger = logging.getLogger(__name__)

ENUM_TYPE_NAMES = {"ENUM", "SET"}


class BaseAdapter(ABC):
    """Base adapter reading table, column and index specs from sqlglot nodes."""

    @property
    @abstractmethod
    def dialect(self) -> str:
        """sqlglot dialect name used for parsing and rendering."""
        ...

    @abstractmethod
    def primary_key_name(
        self, table_name: str, constraint_name: Optional[str]
    ) -> str:
        """
        Get the display name of a table's primary key index.

        Args:
            table_name: Table the key belongs to
            constraint_name: Name from a CONSTRAINT clause, if any

        Returns:
            Index name
        """
        ...

    @abstractmethod
    def unnamed_index_name(
        self, table_name: str, kind: str, columns: list[str]
    ) -> str:
        """
        Get the name the database would give an index declared without one.

        Args:
            table_name: Table the index belongs to
            kind: Index kind string
            columns: Member column names

        Returns:
            Index name
        """
        ...

    def table_spec(self, schema: exp.Schema, sql: Optional[str] = None) -> TableSpec:
        """
        Build a table spec from the column list of a CREATE TABLE statement.

        When the statement text is given, DEFAULT expressions and index
        keywords are taken from it as declared.

        Args:
            schema: Schema node holding the table and its definitions
            sql: Statement text the schema was parsed from

        Returns:
            Parsed table spec
        """
        table_name = schema.this.name if schema.this is not None else ""
        columns: list[ColumnSpec] = []
        indexes: list[IndexSpec] = []

        sources: list[Optional[DefinitionSource]] = [None] * len(schema.expressions)
        if sql is not None:
            declared = definition_sources(sql, self.dialect)
            if len(declared) == len(sources):
                sources = list(declared)
            else:
                logger.debug(
                    f"Column list of table {table_name} has {len(declared)} entries "
                    f"in source but {len(sources)} parsed, using parsed text"
                )

        for node, source in zip(schema.expressions, sources):
            if isinstance(node, exp.ColumnDef):
                columns.append(self.column_spec(node, source))
                continue

            found = self.index_specs(node, table_name, source)
            if not found:
                logger.debug(
                    f"Ignoring {node.key} definition in table {table_name}: "
                    f"{node.sql(dialect=self.dialect)}"
                )
            indexes.extend(found)

        return TableSpec(name=table_name, columns=columns, indexes=indexes)

    def column_spec(
        self, column: exp.ColumnDef, source: Optional[DefinitionSource] = None
    ) -> ColumnSpec:
        """
        Read one column definition.

        Args:
            column: Column definition node
            source: Declared text of the definition, if known

        Returns:
            Column spec with every attribute the parser reported
        """
        spec = ColumnSpec(name=column.name)

        dtype = column.args.get("kind")
        if isinstance(dtype, exp.DataType):
            self._read_type(dtype, spec)

        for constraint in column.args.get("constraints") or []:
            kind = constraint.args.get("kind")
            if isinstance(kind, exp.NotNullColumnConstraint):
                spec.not_null = not kind.args.get("allow_null")
            elif isinstance(kind, exp.AutoIncrementColumnConstraint):
                spec.auto_increment = True
            elif isinstance(kind, exp.DefaultColumnConstraint):
                spec.default = self.default_text(kind.this, source)
            elif isinstance(kind, exp.CommentColumnConstraint):
                spec.comment = self.literal_text(kind.this)
            elif isinstance(kind, exp.CharacterSetColumnConstraint):
                spec.charset = kind.this.name
            elif isinstance(kind, exp.CollateColumnConstraint):
                spec.collate = kind.this.name

        if not spec.auto_increment:
            spec.auto_increment = self.is_auto_increment(column)

        return spec

    def is_auto_increment(self, column: exp.ColumnDef) -> bool:
        """Dialect hook for auto-increment forms other than AUTO_INCREMENT."""
        return False

    def type_keyword(self, dtype: exp.DataType) -> tuple[str, bool]:
        """
        Get the lowercase base keyword of a data type.

        Args:
            dtype: Data type node

        Returns:
            Tuple of (keyword, unsigned)
        """
        rendered = dtype.sql(dialect=self.dialect)
        if dtype.args.get("nested"):
            return rendered.lower(), False
        return rendered.split("(", 1)[0].strip().lower(), False

    def index_specs(
        self,
        node: exp.Expression,
        table_name: str,
        source: Optional[DefinitionSource] = None,
    ) -> list[IndexSpec]:
        """
        Read index definitions from a table-level schema entry.

        A ``CONSTRAINT name ...`` wrapper may hold several definitions; each
        one that declares an index yields a spec.

        Args:
            node: Schema entry that is not a column definition
            table_name: Table the entry belongs to
            source: Declared text of the entry, if known

        Returns:
            Index specs, empty when the entry does not declare an index
        """
        specs = []
        if isinstance(node, exp.Constraint):
            constraint_name = node.name or None
            for inner in node.expressions:
                spec = self._index_spec(inner, table_name, constraint_name)
                if spec is not None:
                    specs.append(spec)
        else:
            spec = self._index_spec(node, table_name, None)
            if spec is not None:
                specs.append(spec)

        # sqlglot drops the INDEX/KEY wording, the source keeps it
        if source is not None and len(specs) == 1 and specs[0].kind != "primary key":
            keyword = source.index_keyword()
            if keyword:
                specs[0].kind = keyword
        return specs

    def default_text(
        self,
        node: Optional[exp.Expression],
        source: Optional[DefinitionSource] = None,
    ) -> Optional[str]:
        """
        Text of a DEFAULT value.

        String and number literals lose their quotes. Any other expression is
        shown as declared when the source is known.
        """
        if isinstance(node, exp.Literal) or source is None:
            return self.literal_text(node)
        return source.default_text() or self.literal_text(node)

    def literal_text(self, node: Optional[exp.Expression]) -> Optional[str]:
        """Literal contents without quotes, or the SQL text of any other expression."""
        if node is None:
            return None
        if isinstance(node, exp.Literal):
            return node.this
        return node.sql(dialect=self.dialect)

    def key_part_name(self, part: exp.Expression) -> str:
        """Column name of one member of an index column list."""
        if isinstance(part, exp.Ordered):
            part = part.this
        if isinstance(
            part, (exp.Column, exp.Identifier, exp.ColumnDef, exp.Anonymous)
        ):
            return part.name
        ident = part.find(exp.Identifier)
        if ident is not None:
            return ident.name
        return part.sql(dialect=self.dialect)

    def _read_type(self, dtype: exp.DataType, spec: ColumnSpec) -> None:
        spec.type_name, spec.unsigned = self.type_keyword(dtype)
        if dtype.args.get("nested"):
            return

        params = [p.sql(dialect=self.dialect) for p in dtype.expressions]
        if not params:
            return

        if getattr(dtype.this, "name", "") in ENUM_TYPE_NAMES:
            spec.enum_values = params
        else:
            spec.length = ",".join(params)

    def _index_spec(
        self,
        node: exp.Expression,
        table_name: str,
        constraint_name: Optional[str],
    ) -> Optional[IndexSpec]:
        if isinstance(node, exp.PrimaryKey):
            return IndexSpec(
                name=self.primary_key_name(table_name, constraint_name),
                kind="primary key",
                columns=[self.key_part_name(p) for p in node.expressions],
            )

        if isinstance(node, exp.UniqueColumnConstraint):
            schema = node.this
            if not isinstance(schema, exp.Schema):
                return None
            columns = [self.key_part_name(p) for p in schema.expressions]
            name = schema.this.name if schema.this is not None else None
            return IndexSpec(
                name=name
                or constraint_name
                or self.unnamed_index_name(table_name, "unique key", columns),
                kind="unique key",
                columns=columns,
            )

        if isinstance(node, exp.IndexColumnConstraint):
            prefix = node.args.get("kind")
            kind = f"{str(prefix).lower()} key" if prefix else "key"
            columns = [self.key_part_name(p) for p in node.expressions]
            return IndexSpec(
                name=node.name
                or constraint_name
                or self.unnamed_index_name(table_name, kind, columns),
                kind=kind,
                columns=columns,
            )

        return None
