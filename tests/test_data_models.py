"""
Unit tests for data models.
"""

import dataclasses
import pytest
from table_formatter.formatting.data_models import (
    ColumnDelimiter,
    FormatConfig,
    OutputFormat,
    SavedSnapshot,
)


class TestColumnDelimiter:
    """Tests for ColumnDelimiter coercion."""

    @pytest.mark.parametrize("value, expected", [
        ("tab", ColumnDelimiter.TAB),
        ("\t", ColumnDelimiter.TAB),
        ("comma", ColumnDelimiter.COMMA),
        ("PIPE", ColumnDelimiter.PIPE),
        (";", ColumnDelimiter.SEMICOLON),
        ("space", ColumnDelimiter.SPACE),
        (ColumnDelimiter.COMMA, ColumnDelimiter.COMMA),
    ])
    def test_coerce(self, value, expected):
        """Should accept a member, its character or its name in any case."""
        assert ColumnDelimiter.coerce(value) is expected

    def test_unknown(self):
        """Should raise ValueError for an unknown delimiter."""
        with pytest.raises(ValueError, match="Unknown column delimiter"):
            ColumnDelimiter.coerce("colon")

    def test_label(self):
        """Should expose the lowercase member name as label."""
        assert ColumnDelimiter.SEMICOLON.label == "semicolon"


class TestFormatConfig:
    """Tests for FormatConfig dataclass."""

    def test_defaults(self):
        """Should default to one column, tab delimiter, tab output and line numbers."""
        config = FormatConfig()
        assert config.detect_columns is False
        assert config.column_count == 1
        assert config.column_delimiter is ColumnDelimiter.TAB
        assert config.output_format is OutputFormat.TAB
        assert config.show_line_numbers is True

    def test_string_values_coerced(self):
        """Should coerce string enum values."""
        config = FormatConfig(column_delimiter="pipe", output_format="Markdown")
        assert config.column_delimiter is ColumnDelimiter.PIPE
        assert config.output_format is OutputFormat.MARKDOWN

    def test_invalid_column_count(self):
        """Should reject a column count below 1."""
        with pytest.raises(ValueError, match="column_count must be >= 1"):
            FormatConfig(column_count=0)

    def test_non_integer_column_count(self):
        """Should reject a non-integer column count."""
        with pytest.raises(ValueError, match="column_count must be an integer"):
            FormatConfig(column_count="3")

    def test_invalid_output_format(self):
        """Should reject an unknown output format."""
        with pytest.raises(ValueError, match="Unknown output format"):
            FormatConfig(output_format="html")

    def test_immutable(self):
        """Should not allow fields to be reassigned."""
        config = FormatConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.column_count = 2

    def test_replace_revalidates(self):
        """Should validate values passed to dataclasses.replace."""
        with pytest.raises(ValueError):
            dataclasses.replace(FormatConfig(), column_count=-1)

    def test_to_dict_uses_labels(self):
        """Should serialize enums by their labels."""
        data = FormatConfig(column_delimiter=ColumnDelimiter.COMMA).to_dict()
        assert data["column_delimiter"] == "comma"
        assert data["output_format"] == "tab"

    def test_from_dict(self):
        """Should build a config from a dict and ignore unknown keys."""
        config = FormatConfig.from_dict({
            "detect_columns": True,
            "column_delimiter": "comma",
            "output_format": "csv",
            "unrelated": "ignored",
        })
        assert config == FormatConfig(
            detect_columns=True,
            column_delimiter=ColumnDelimiter.COMMA,
            output_format=OutputFormat.CSV,
        )


class TestSavedSnapshot:
    """Tests for SavedSnapshot dataclass."""

    def test_generated_fields(self):
        """Should generate a unique id and a UTC timestamp."""
        first = SavedSnapshot(name="Loot", input="1 Sword", output="001 Sword")
        second = SavedSnapshot(name="Loot", input="1 Sword", output="001 Sword")
        assert first.id != second.id
        assert first.created_at.endswith("+00:00")
        assert first.config == FormatConfig()

    def test_preview_short_input(self):
        """Should return short input unchanged."""
        snapshot = SavedSnapshot(name="Loot", input="1 Sword", output="")
        assert snapshot.preview() == "1 Sword"

    def test_preview_truncates(self):
        """Should cut long input at 50 characters and add an ellipsis."""
        snapshot = SavedSnapshot(name="Loot", input="x" * 60, output="")
        assert snapshot.preview() == "x" * 50 + "..."

    def test_dict_round_trip(self):
        """Should restore an equal snapshot from its dict form."""
        snapshot = SavedSnapshot(
            name="Encounters",
            input="1 Orc",
            output="| 001 | Orc |",
            config=FormatConfig(output_format=OutputFormat.MARKDOWN),
        )
        assert SavedSnapshot.from_dict(snapshot.to_dict()) == snapshot

    def test_from_dict_missing_field(self):
        """Should raise ValueError for an incomplete record."""
        with pytest.raises(ValueError, match="Invalid snapshot record"):
            SavedSnapshot.from_dict({"id": "1", "input": "x"})
