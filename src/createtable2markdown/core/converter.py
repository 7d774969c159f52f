"""End-to-end conversion from SQL text to Markdown."""

import logging
import sys
from typing import Optional

from createtable2markdown.adapters import create_adapter
from createtable2markdown.core.formatter import to_definition
from createtable2markdown.core.parser import StatementParser
from createtable2markdown.core.renderer import render_tables
from createtable2markdown.models.config import ConverterConfig

logger = logging.getLogger(__name__)


def convert(sql: str, config: Optional[ConverterConfig] = None) -> str:
    """
    Convert every CREATE TABLE statement in the text to Markdown.

    Args:
        sql: Raw SQL text
        config: Converter configuration (defaults apply when omitted)

    Returns:
        Concatenated table definition blocks, empty when there are none

    Raises:
        EmptyIndexError: If a parsed index has no columns
    """
    config = config or ConverterConfig()
    parser = StatementParser(create_adapter(config.dialect))

    tables = parser.parse(sql)
    logger.debug(f"Found {len(tables)} CREATE TABLE statements")

    return render_tables(to_definition(table) for table in tables)


def read_input(config: ConverterConfig) -> str:
    """
    Read all SQL text from the configured input file or stdin.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the content is not valid in the configured encoding
    """
    if config.input_path is None:
        return sys.stdin.read()

    with open(config.input_path, encoding=config.encoding) as f:
        return f.read()


def write_output(text: str, config: ConverterConfig) -> None:
    """
    Write Markdown to the configured output file (truncating it) or stdout.

    Raises:
        OSError: If the file cannot be opened or written
    """
    if config.output_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    with open(config.output_path, "w", encoding=config.encoding) as f:
        f.write(text)
