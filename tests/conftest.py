"""Pytest configuration and shared fixtures for converter tests"""

import logging

import pytest

from createtable2markdown.adapters import create_adapter
from createtable2markdown.adapters.base import BaseAdapter
from createtable2markdown.core import StatementParser
from createtable2markdown.models.config import ENV_DIALECT, ENV_VERBOSE

FOO_TABLE_SQL = """CREATE TABLE foo (
    id int(10) unsigned NOT NULL AUTO_INCREMENT,
    aaa int(10),
    bbb varchar(10),
    ccc varchar(10),
    PRIMARY KEY (id),
    UNIQUE KEY aaa (aaa),
    KEY bbb_ccc (bbb, ccc)
)"""


# ==================== Environment Fixtures ====================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of the tests"""
    monkeypatch.delenv(ENV_DIALECT, raising=False)
    monkeypatch.delenv(ENV_VERBOSE, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the root logger setup done by the command line entry point"""
    root = logging.getLogger()
    sqlglot_logger = logging.getLogger("sqlglot")
    handlers, level = root.handlers[:], root.level
    sqlglot_level = sqlglot_logger.level

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
    sqlglot_logger.setLevel(sqlglot_level)


# ==================== SQL Fixtures ====================


@pytest.fixture
def foo_table_sql() -> str:
    """MySQL CREATE TABLE with primary, unique and plain keys"""
    return FOO_TABLE_SQL


# ==================== Parser Fixtures ====================


@pytest.fixture
def mysql_adapter() -> BaseAdapter:
    """MySQL adapter instance"""
    return create_adapter("mysql")


@pytest.fixture
def pg_adapter() -> BaseAdapter:
    """PostgreSQL adapter instance"""
    return create_adapter("postgres")


@pytest.fixture
def mysql_parser(mysql_adapter: BaseAdapter) -> StatementParser:
    """Statement parser reading MySQL"""
    return StatementParser(mysql_adapter)


@pytest.fixture
def pg_parser(pg_adapter: BaseAdapter) -> StatementParser:
    """Statement parser reading PostgreSQL"""
    return StatementParser(pg_adapter)
