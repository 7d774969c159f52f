"""Unit Tests for Converter Configuration"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from createtable2markdown.models.config import ENV_DIALECT, ENV_VERBOSE, ConverterConfig


class TestConverterConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test that stdin, stdout and MySQL are the defaults."""
        config = ConverterConfig()
        assert config.input_path is None
        assert config.output_path is None
        assert config.dialect == "mysql"
        assert config.verbose is False
        assert config.encoding == "utf-8"

    def test_dialect_is_normalized(self):
        """Test case folding and the postgresql alias."""
        assert ConverterConfig(dialect="MySQL").dialect == "mysql"
        assert ConverterConfig(dialect="postgresql").dialect == "postgres"

    def test_unknown_dialect_is_rejected(self):
        """Test that unsupported dialects fail validation."""
        with pytest.raises(ValidationError, match="Unsupported SQL dialect"):
            ConverterConfig(dialect="oracle")


class TestFromEnv:
    """Test environment loading."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        """Test dialect and verbosity from the environment."""
        monkeypatch.setenv(ENV_DIALECT, "postgres")
        monkeypatch.setenv(ENV_VERBOSE, "yes")

        config = ConverterConfig.from_env()

        assert config.dialect == "postgres"
        assert config.verbose is True

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch):
        """Test that explicit values beat the environment."""
        monkeypatch.setenv(ENV_DIALECT, "postgres")

        config = ConverterConfig.from_env(dialect="mysql", input_path=Path("a.sql"))

        assert config.dialect == "mysql"
        assert config.input_path == Path("a.sql")

    def test_none_overrides_fall_through(self, monkeypatch: pytest.MonkeyPatch):
        """Test that unset flags keep the environment value."""
        monkeypatch.setenv(ENV_VERBOSE, "1")

        config = ConverterConfig.from_env(verbose=None, dialect=None)

        assert config.verbose is True
        assert config.dialect == "mysql"

    def test_falsy_verbose(self, monkeypatch: pytest.MonkeyPatch):
        """Test that anything but a truthy word disables verbosity."""
        monkeypatch.setenv(ENV_VERBOSE, "off")
        assert ConverterConfig.from_env().verbose is False
