"""Dialect adapters reading parsed DDL into table specs."""

from .base import BaseAdapter
from .mysql import MySQLAdapter
from .postgresql import PostgresAdapter

__all__ = [
    "BaseAdapter",
    "MySQLAdapter",
    "PostgresAdapter",
    "create_adapter",
]


def create_adapter(dialect: str) -> BaseAdapter:
    """
    Factory function to create the adapter for a SQL dialect.

    Args:
        dialect: sqlglot dialect name

    Returns:
        Dialect adapter instance

    Raises:
        ValueError: If the dialect is not supported
    """
    adapters = {
        "mysql": MySQLAdapter,
        "postgres": PostgresAdapter,
    }

    adapter_class = adapters.get(dialect)

    if adapter_class is None:
        raise ValueError(
            f"Unsupported SQL dialect: {dialect}. "
            f"Supported dialects: {', '.join(adapters.keys())}"
        )

    return adapter_class()
