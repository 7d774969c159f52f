"""Pydantic models for parsed DDL, rendered rows and configuration."""

from .config import SUPPORTED_DIALECTS, ConverterConfig
from .table import (
    ColumnRow,
    ColumnSpec,
    IndexRow,
    IndexSpec,
    TableDefinition,
    TableSpec,
)

__all__ = [
    "SUPPORTED_DIALECTS",
    "ConverterConfig",
    "ColumnSpec",
    "IndexSpec",
    "TableSpec",
    "ColumnRow",
    "IndexRow",
    "TableDefinition",
]
