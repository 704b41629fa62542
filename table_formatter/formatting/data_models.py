"""
Data models for table formatting.

This module defines the core data structures shared by the row extractor,
the output renderer and the snapshot store.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List
import uuid

Row = List[str]
Table = List[Row]


class ColumnDelimiter(str, Enum):
    """Characters that may separate columns within a single input line."""

    TAB = "\t"
    COMMA = ","
    PIPE = "|"
    SEMICOLON = ";"
    SPACE = " "

    @classmethod
    def coerce(cls, value: Any) -> "ColumnDelimiter":
        """
        Accept a member, its literal character, or its lowercase name.

        Raises:
            ValueError: If the value names no known delimiter
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                member = cls.__members__.get(value.upper())
                if member is not None:
                    return member
        names = ", ".join(name.lower() for name in cls.__members__)
        raise ValueError(f"Unknown column delimiter {value!r}. Available: {names}")

    @property
    def label(self) -> str:
        return self.name.lower()


class OutputFormat(str, Enum):
    """Target formats for rendered output."""

    TAB = "tab"
    CSV = "csv"
    MARKDOWN = "markdown"
    ALIGNED = "aligned"
    NONE = "none"

    @classmethod
    def coerce(cls, value: Any) -> "OutputFormat":
        """
        Accept a member or its string value.

        Raises:
            ValueError: If the value names no known format
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown output format {value!r}. Available: {available}")


@dataclass(frozen=True)
class FormatConfig:
    """
    Options controlling extraction and rendering.

    Attributes:
        detect_columns: Split lines into cells on delimiters
        column_count: Fixed row width used when detect_columns is False
        column_delimiter: Delimiter checked first when detecting columns
        output_format: Format the renderer produces
        show_line_numbers: Prefix rows with zero-padded 1-based indices
    """
    detect_columns: bool = False
    column_count: int = 1
    column_delimiter: ColumnDelimiter = ColumnDelimiter.TAB
    output_format: OutputFormat = OutputFormat.TAB
    show_line_numbers: bool = True

    def __post_init__(self):
        """Validate column count and coerce enum fields."""
        if not isinstance(self.column_count, int) or isinstance(self.column_count, bool):
            raise ValueError(f"column_count must be an integer, got {self.column_count!r}")
        if self.column_count < 1:
            raise ValueError(f"column_count must be >= 1, got {self.column_count}")
        object.__setattr__(self, "column_delimiter", ColumnDelimiter.coerce(self.column_delimiter))
        object.__setattr__(self, "output_format", OutputFormat.coerce(self.output_format))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-friendly values."""
        return {
            "detect_columns": self.detect_columns,
            "column_count": self.column_count,
            "column_delimiter": self.column_delimiter.label,
            "output_format": self.output_format.value,
            "show_line_numbers": self.show_line_numbers,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormatConfig":
        """Build a config from to_dict() output; missing keys use defaults."""
        known = {key: data[key] for key in cls.__dataclass_fields__ if key in data}
        return cls(**known)


def _new_snapshot_id() -> str:
    return uuid.uuid4().hex


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class SavedSnapshot:
    """
    A named record of an input, its rendered output and the settings used.

    Snapshots are never edited; saving again creates a new snapshot with a
    new id.

    Attributes:
        name: User-chosen name, unique case-insensitively within a store
        input: Original raw text
        output: Output rendered when the snapshot was saved
        config: FormatConfig used to render the output
        id: Unique identifier
        created_at: ISO-8601 UTC creation timestamp
    """
    name: str
    input: str
    output: str
    config: FormatConfig = field(default_factory=FormatConfig)
    id: str = field(default_factory=_new_snapshot_id)
    created_at: str = field(default_factory=_utc_timestamp)

    def preview(self, length: int = 50) -> str:
        """Leading slice of the input, with '...' when truncated."""
        if len(self.input) > length:
            return self.input[:length] + "..."
        return self.input

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["config"] = self.config.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SavedSnapshot":
        """
        Build a snapshot from stored JSON.

        Raises:
            ValueError: If required fields are missing or invalid
        """
        try:
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                input=str(data["input"]),
                output=str(data.get("output", "")),
                config=FormatConfig.from_dict(data.get("config") or {}),
                created_at=str(data.get("created_at", "")),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid snapshot record: {e}")
