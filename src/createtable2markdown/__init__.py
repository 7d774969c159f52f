"""Convert CREATE TABLE DDL into Markdown documentation tables."""

from createtable2markdown.core import convert
from createtable2markdown.models import ConverterConfig

__version__ = "0.1.0"

__all__ = ["convert", "ConverterConfig", "__version__"]
