"""Converter configuration model."""

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

SUPPORTED_DIALECTS = ("mysql", "postgres")

ENV_DIALECT = "CREATETABLE2MARKDOWN_DIALECT"
ENV_VERBOSE = "CREATETABLE2MARKDOWN_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


class ConverterConfig(BaseModel):
    """Configuration for one conversion run."""

    input_path: Optional[Path] = Field(
        default=None,
        description="Input SQL file (stdin when not set)",
    )
    output_path: Optional[Path] = Field(
        default=None,
        description="Output Markdown file (stdout when not set)",
    )
    dialect: str = Field(
        default="mysql",
        description="SQL dialect used to parse the input",
    )
    verbose: bool = Field(
        default=False,
        description="Log diagnostics to stderr",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding for input and output files",
    )

    @field_validator("dialect")
    @classmethod
    def validate_dialect(cls, v: str) -> str:
        """Validate the parser dialect name."""
        dialect = v.strip().lower()
        if dialect == "postgresql":
            dialect = "postgres"

        if dialect not in SUPPORTED_DIALECTS:
            raise ValueError(
                f"Unsupported SQL dialect: {v}. "
                f"Supported: {', '.join(SUPPORTED_DIALECTS)}"
            )
        return dialect

    @classmethod
    def from_env(cls, **overrides: Any) -> "ConverterConfig":
        """
        Build a configuration from environment variables.

        Values passed as keyword arguments win over the environment; ``None``
        overrides are ignored so unset CLI flags fall through.

        Args:
            **overrides: Explicit field values

        Returns:
            Converter configuration
        """
        values: dict[str, Any] = {}

        dialect = os.getenv(ENV_DIALECT)
        if dialect:
            values["dialect"] = dialect

        verbose = os.getenv(ENV_VERBOSE)
        if verbose:
            values["verbose"] = verbose.strip().lower() in _TRUTHY

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "input_path": "schema.sql",
                    "output_path": "schema.md",
                    "dialect": "mysql",
                    "verbose": False,
                }
            ]
        }
    }
