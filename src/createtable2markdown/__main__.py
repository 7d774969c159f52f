"""Entry point for running createtable2markdown as a module."""

import sys

from createtable2markdown.cli import main

if __name__ == "__main__":
    sys.exit(main())
