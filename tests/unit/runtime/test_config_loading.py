"""Unit tests for configuration models, template loading and the app context."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from product_catalog.runtime.config.config_data import ConfigData, DatabaseConfig
from product_catalog.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from product_catalog.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestSubstituteEnvVars:
    """Test cases for substitute_env_vars function."""

    def test_substitute_env_var_in_text(self):
        """Test substitution of environment variables within text."""
        with patch.dict(os.environ, {"DB_HOST": "db", "DB_PORT": "5432"}):
            result = substitute_env_vars("postgresql://${DB_HOST}:${DB_PORT}/catalog")
            assert result == "postgresql://db:5432/catalog"

    def test_default_used_when_missing(self):
        """Test a default containing colons and slashes is kept intact."""
        with patch.dict(os.environ, {}, clear=True):
            result = substitute_env_vars("${DATABASE_URL:-sqlite:///./catalog.db}")
            assert result == "sqlite:///./catalog.db"

    def test_default_ignored_when_set(self):
        with patch.dict(os.environ, {"DATABASE_URL": "sqlite://"}):
            assert substitute_env_vars("${DATABASE_URL:-sqlite:///./catalog.db}") == "sqlite://"

    def test_required_var_missing(self):
        """Test substitution fails when a required variable is missing."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="Required environment variable MISSING_VAR not set"):
                substitute_env_vars("${MISSING_VAR}")

    def test_required_var_custom_message(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DATABASE_URL: catalog needs a database"):
                substitute_env_vars("${DATABASE_URL:?catalog needs a database}")


class TestLoadTemplatedYaml:
    """Test cases for load_templated_yaml."""

    def test_load_config_section(self, tmp_path: Path):
        """Should validate the 'config' section into ConfigData."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  app:\n"
            "    environment: test\n"
            "  database:\n"
            '    url: "${TEST_DB_URL:-sqlite:///:memory:}"\n'
            "    echo: true\n"
        )

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(config_file)

        assert config.app.environment == "test"
        assert config.database.url == "sqlite:///:memory:"
        assert config.database.echo is True
        assert config.logging.level == "INFO"

    def test_shipped_config_file_loads(self):
        """The repository's config.yaml should load with defaults."""
        shipped = Path(__file__).resolve().parents[3] / "config.yaml"

        with patch.dict(os.environ, {}, clear=True):
            config = load_templated_yaml(shipped)

        assert config.database.url == "sqlite:///./catalog.db"
        assert config.logging.file == ""

    def test_empty_file_rejected(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(config_file)

    def test_invalid_values_rejected(self, tmp_path: Path):
        """Should raise ValueError for values that fail validation."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  app:\n    environment: staging\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_templated_yaml(tmp_path / "absent.yaml")


class TestDatabaseConfig:
    """Test the derived DatabaseConfig properties."""

    @pytest.mark.parametrize(
        ("url", "backend", "in_memory"),
        [
            ("sqlite://", "sqlite", True),
            ("sqlite:///:memory:", "sqlite", True),
            ("sqlite:///./catalog.db", "sqlite", False),
            ("postgresql://user:pw@localhost:5432/catalog", "postgresql", False),
            ("mysql+pymysql://user:pw@localhost/catalog", "mysql", False),
        ],
    )
    def test_backend_detection(self, url: str, backend: str, in_memory: bool):
        config = DatabaseConfig(url=url)

        assert config.backend == backend
        assert config.is_in_memory is in_memory


class TestContextManager:
    """Test the application context helpers."""

    def test_default_context_available(self):
        """Should have a default context available."""
        context = get_context()

        assert isinstance(context, AppContext)
        assert isinstance(get_config(), ConfigData)
        assert context.config is get_config()

    def test_with_context_override(self):
        """Should override config for the duration of the block only."""
        original = get_config()
        override = ConfigData()
        override.database.url = "sqlite://"

        with with_context(override):
            assert get_config() is override
            assert get_config().database.url == "sqlite://"

        assert get_config() is original

    def test_with_context_restores_after_error(self):
        original = get_config()

        with pytest.raises(RuntimeError):
            with with_context(ConfigData()):
                raise RuntimeError("boom")

        assert get_config() is original

    def test_with_context_none_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"database": {"url": "sqlite://"}}):  # type: ignore[arg-type]
                pass

    def test_set_config_replaces_config(self):
        """set_config should replace the active configuration."""
        original = get_config()
        replacement = ConfigData()
        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_config(original)
