"""Table, column and index models for parsed DDL and rendered rows."""

from typing import Optional

from pydantic import BaseModel, Field


class ColumnSpec(BaseModel):
    """A column definition as read from a parsed CREATE TABLE statement."""

    name: str = Field(..., description="Column name")
    type_name: str = Field(default="", description="Base type keyword, lowercase")
    length: Optional[str] = Field(
        None, description="Type size arguments (e.g. '10' or '10,2')"
    )
    enum_values: list[str] = Field(
        default_factory=list, description="Quoted ENUM/SET member literals"
    )
    unsigned: bool = Field(default=False, description="Whether type is unsigned")
    charset: Optional[str] = Field(None, description="Column character set")
    collate: Optional[str] = Field(None, description="Column collation")
    not_null: bool = Field(default=False, description="Whether NOT NULL is declared")
    auto_increment: bool = Field(
        default=False, description="Whether column auto-increments"
    )
    default: Optional[str] = Field(None, description="Default value expression")
    comment: Optional[str] = Field(None, description="Column comment")


class IndexSpec(BaseModel):
    """An index definition as read from a parsed CREATE TABLE statement."""

    name: str = Field(..., description="Index name")
    kind: str = Field(
        ..., description="Index category (primary key, unique key, key, ...)"
    )
    columns: list[str] = Field(
        default_factory=list, description="Member column names in declared order"
    )


class TableSpec(BaseModel):
    """A parsed CREATE TABLE statement."""

    name: str = Field(..., description="Table name")
    columns: list[ColumnSpec] = Field(
        default_factory=list, description="Column definitions"
    )
    indexes: list[IndexSpec] = Field(
        default_factory=list, description="Index definitions"
    )

    @property
    def column_count(self) -> int:
        """Get number of columns."""
        return len(self.columns)

    @property
    def index_count(self) -> int:
        """Get number of indexes."""
        return len(self.indexes)


class ColumnRow(BaseModel):
    """Display strings for one row of the column table."""

    model_config = {"frozen": True}

    name: str
    type: str = ""
    not_null: str = ""
    auto_increment: str = ""
    default: str = ""
    comment: str = ""

    def cells(self) -> list[str]:
        """Cells in table column order."""
        return [
            self.name,
            self.type,
            self.not_null,
            self.auto_increment,
            self.default,
            self.comment,
        ]


class IndexRow(BaseModel):
    """Display strings for one row of the index table."""

    model_config = {"frozen": True}

    name: str
    type: str = ""
    columns: str = ""

    def cells(self) -> list[str]:
        """Cells in table column order."""
        return [self.name, self.type, self.columns]


class TableDefinition(BaseModel):
    """Rows ready for rendering as one table definition block."""

    name: str = Field(..., description="Table name")
    columns: list[ColumnRow] = Field(default_factory=list, description="Column rows")
    indexes: list[IndexRow] = Field(default_factory=list, description="Index rows")
