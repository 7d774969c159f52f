"""Command line entry point: CREATE TABLE DDL in, Markdown tables out."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from createtable2markdown.core import convert, read_input, write_output
from createtable2markdown.core.formatter import EmptyIndexError
from createtable2markdown.models.config import SUPPORTED_DIALECTS, ConverterConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="createtable2markdown",
        description="Convert CREATE TABLE statements into Markdown tables",
    )
    parser.add_argument("-i", dest="input", help="input file, default = stdin")
    parser.add_argument("-o", dest="output", help="output file, default = stdout")
    parser.add_argument(
        "-v",
        dest="verbose",
        action="store_true",
        default=None,
        help="verbose, log diagnostics to stderr",
    )
    parser.add_argument(
        "-d",
        "--dialect",
        help=f"SQL dialect ({', '.join(SUPPORTED_DIALECTS)}), default = mysql",
    )
    return parser


def configure_logging(config: ConverterConfig) -> None:
    """
    Route diagnostics to stderr according to the configuration.

    Verbose runs log everything from DEBUG up, including sqlglot's warnings
    about syntax it only partially understands; quiet runs keep warnings and
    errors from this package only.
    """
    level = logging.DEBUG if config.verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
    logging.getLogger("sqlglot").setLevel(
        logging.DEBUG if config.verbose else logging.ERROR
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the converter.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    load_dotenv()
    args = build_arg_parser().parse_args(argv)

    try:
        config = ConverterConfig.from_env(
            input_path=Path(args.input) if args.input else None,
            output_path=Path(args.output) if args.output else None,
            dialect=args.dialect,
            verbose=args.verbose,
        )
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config)

    try:
        sql = read_input(config)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Can not read input: {e}")
        return 1

    try:
        markdown = convert(sql, config)
    except EmptyIndexError as e:
        logger.error(f"Invalid index definition: {e}")
        return 1

    try:
        write_output(markdown, config)
    except OSError as e:
        logger.error(f"Can not write output: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
