"""
Table formatting pipeline.

Extracts rows of cells from pasted text and renders them in a chosen
output format.
"""

from .data_models import ColumnDelimiter, FormatConfig, OutputFormat, SavedSnapshot
from .table_formatter import TableFormatter, extract, format_text, render

__all__ = [
    "ColumnDelimiter",
    "FormatConfig",
    "OutputFormat",
    "SavedSnapshot",
    "TableFormatter",
    "extract",
    "render",
    "format_text",
]
