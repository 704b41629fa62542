"""
Random Table Formatter

Reformats pasted random tables (numbered or delimited lists of entries)
as tab-separated, CSV, Markdown or space-aligned text with optional line
numbers, and keeps named snapshots for later recall.
"""

__version__ = "1.0.0"

# Main classes available for library use
from .formatting.data_models import ColumnDelimiter, FormatConfig, OutputFormat, SavedSnapshot
from .formatting.table_formatter import TableFormatter, extract, format_text, render
from .formatting.components.row_extractor import RowExtractor
from .formatting.components.output_renderer import OutputRenderer
from .session.formatter_session import FormatterSession
from .storage.snapshot_store import InMemorySnapshotStore, JsonFileSnapshotStore, SnapshotStore

__all__ = [
    "ColumnDelimiter",
    "FormatConfig",
    "OutputFormat",
    "SavedSnapshot",
    "TableFormatter",
    "RowExtractor",
    "OutputRenderer",
    "FormatterSession",
    "SnapshotStore",
    "InMemorySnapshotStore",
    "JsonFileSnapshotStore",
    "extract",
    "render",
    "format_text",
]
