#!/usr/bin/env python3
"""Unit tests for config helper functions."""

import pytest
from table_formatter.formatting.data_models import ColumnDelimiter, FormatConfig, OutputFormat
from table_formatter.utils.config import ConfigManager, ENV_FILENAME


FORMAT_KEYS = [
    "TABLE_FORMAT_DETECT_COLUMNS",
    "TABLE_FORMAT_COLUMN_COUNT",
    "TABLE_FORMAT_DELIMITER",
    "TABLE_FORMAT_OUTPUT_FORMAT",
    "TABLE_FORMAT_SHOW_LINE_NUMBERS",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove formatter settings from the environment."""
    for key in FORMAT_KEYS + [
        "TABLE_FORMAT_MAX_INPUT_LENGTH",
        "TABLE_FORMAT_UNDO_WINDOW_SECONDS",
        "TABLE_FORMAT_SNAPSHOT_FILE",
    ]:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestConfigHelpers:
    """Test type-safe environment variable helpers."""

    def test_get_env_string_returns_value(self, monkeypatch):
        """Should return the environment value."""
        monkeypatch.setenv('TEST_STRING', 'hello')
        assert ConfigManager().get_env_string('TEST_STRING') == 'hello'

    def test_get_env_string_returns_default(self):
        """Should return the default for an unset variable."""
        result = ConfigManager().get_env_string('NONEXISTENT_VAR', 'default_value')
        assert result == 'default_value'

    def test_get_env_int_returns_value(self, monkeypatch):
        """Should parse an integer value."""
        monkeypatch.setenv('TEST_INT', '42')
        result = ConfigManager().get_env_int('TEST_INT', 0)
        assert result == 42
        assert isinstance(result, int)

    def test_get_env_int_invalid_returns_default(self, monkeypatch):
        """Should fall back to the default for a non-integer value."""
        monkeypatch.setenv('TEST_INT', 'not_a_number')
        assert ConfigManager().get_env_int('TEST_INT', 99) == 99

    def test_get_env_float_returns_value(self, monkeypatch):
        """Should parse a float value."""
        monkeypatch.setenv('TEST_FLOAT', '3.14')
        result = ConfigManager().get_env_float('TEST_FLOAT', 0.0)
        assert abs(result - 3.14) < 0.001

    def test_get_env_float_invalid_returns_default(self, monkeypatch):
        """Should fall back to the default for a non-numeric value."""
        monkeypatch.setenv('TEST_FLOAT', 'pi')
        assert ConfigManager().get_env_float('TEST_FLOAT', 2.5) == 2.5

    @pytest.mark.parametrize("value, expected", [
        ('true', True), ('1', True), ('YES', True), ('on', True),
        ('false', False), ('0', False), ('nope', False),
    ])
    def test_get_env_bool(self, monkeypatch, value, expected):
        """Should treat true/1/yes/on as True in any case and anything else as False."""
        monkeypatch.setenv('TEST_BOOL', value)
        assert ConfigManager().get_env_bool('TEST_BOOL', not expected) is expected

    def test_get_env_bool_default(self):
        """Should return the default for an unset variable."""
        assert ConfigManager().get_env_bool('NONEXISTENT_BOOL', True) is True


class TestFormatterSettings:
    """Test formatter-specific settings."""

    def test_defaults(self, clean_env):
        """Should use the built-in defaults when nothing is configured."""
        config = ConfigManager()
        assert config.get_max_input_length() == 50000
        assert config.get_undo_window_seconds() == 5.0
        assert config.get_snapshot_file() == "data/saved_tables.json"
        assert config.get_default_format_config() == FormatConfig()

    def test_max_input_length_must_be_positive(self, clean_env):
        """Should ignore a non-positive maximum input length."""
        clean_env.setenv("TABLE_FORMAT_MAX_INPUT_LENGTH", "-5")
        assert ConfigManager().get_max_input_length() == 50000

    def test_format_config_from_environment(self, clean_env):
        """Should build the default FormatConfig from environment values."""
        clean_env.setenv("TABLE_FORMAT_DETECT_COLUMNS", "yes")
        clean_env.setenv("TABLE_FORMAT_DELIMITER", "semicolon")
        clean_env.setenv("TABLE_FORMAT_OUTPUT_FORMAT", "aligned")
        clean_env.setenv("TABLE_FORMAT_SHOW_LINE_NUMBERS", "false")

        config = ConfigManager().get_default_format_config()
        assert config.detect_columns is True
        assert config.column_delimiter is ColumnDelimiter.SEMICOLON
        assert config.output_format is OutputFormat.ALIGNED
        assert config.show_line_numbers is False

    def test_invalid_format_config_falls_back(self, clean_env):
        """Should fall back to FormatConfig() when a value is invalid."""
        clean_env.setenv("TABLE_FORMAT_OUTPUT_FORMAT", "html")
        assert ConfigManager().get_default_format_config() == FormatConfig()


class TestEnvironmentFileDiscovery:
    """Test .env file loading."""

    def test_loads_env_file_from_cwd(self, clean_env, tmp_path):
        """Should load the env file found in the working directory."""
        (tmp_path / ENV_FILENAME).write_text("TABLE_FORMAT_MAX_INPUT_LENGTH=321\n", encoding="utf-8")
        clean_env.chdir(tmp_path)
        # Registered with monkeypatch so the loaded value is removed afterwards
        clean_env.setenv("TABLE_FORMAT_MAX_INPUT_LENGTH", "1")

        config = ConfigManager()
        assert config._env_path == tmp_path / ENV_FILENAME
        assert config.get_max_input_length() == 321

    def test_missing_env_file(self, clean_env, tmp_path):
        """Should report False when no env file is found."""
        workdir = tmp_path / "a" / "b" / "c"
        workdir.mkdir(parents=True)
        clean_env.chdir(workdir)

        assert ConfigManager().load_environment() is False
