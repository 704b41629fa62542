#!/usr/bin/env python3
"""
TableFormatter - Orchestrator for the extract/render pipeline.

Applies the input length limit, then runs raw text through the
RowExtractor and OutputRenderer.
"""

import logging
from typing import Optional

from .data_models import FormatConfig, OutputFormat, Table
from .components.row_extractor import RowExtractor
from .components.output_renderer import OutputRenderer
from ..exceptions import InputTooLongError
from ..utils.config import get_max_input_length

logger = logging.getLogger(__name__)


class TableFormatter:
    """
    Coordinates the formatting pipeline:
    1. Reject input longer than the configured maximum
    2. Extract rows of cells from the raw text
    3. Render the rows in the configured output format
    """

    def __init__(
        self,
        max_input_length: Optional[int] = None,
        extractor: Optional[RowExtractor] = None,
        renderer: Optional[OutputRenderer] = None
    ):
        """
        Initialize formatter.

        Args:
            max_input_length: Character limit (if None, loads from config)
            extractor: Row extractor (default: RowExtractor())
            renderer: Output renderer (default: OutputRenderer())
        """
        if max_input_length is None:
            max_input_length = get_max_input_length()
        if max_input_length < 1:
            raise ValueError(f"max_input_length must be >= 1, got {max_input_length}")

        self.max_input_length = max_input_length
        self.extractor = extractor or RowExtractor()
        self.renderer = renderer or OutputRenderer()

    def validate_input(self, raw_text: str) -> None:
        """
        Check raw text against the length limit.

        Raises:
            InputTooLongError: If the text is longer than max_input_length
        """
        if len(raw_text) > self.max_input_length:
            logger.warning(
                f"Rejected input of {len(raw_text)} characters (limit {self.max_input_length})"
            )
            raise InputTooLongError(self.max_input_length, len(raw_text))

    def extract(self, raw_text: str, config: FormatConfig) -> Table:
        """Extract rows without the length check."""
        return self.extractor.extract(raw_text, config)

    def render(self, table: Table, show_line_numbers: bool, output_format: OutputFormat) -> str:
        """Render rows in the given format."""
        return self.renderer.render(table, show_line_numbers, output_format)

    def format(self, raw_text: str, config: FormatConfig) -> str:
        """
        Validate, extract and render raw text.

        Args:
            raw_text: Pasted table text
            config: Extraction and rendering settings

        Returns:
            Formatted text

        Raises:
            InputTooLongError: If the text is longer than max_input_length
        """
        self.validate_input(raw_text)
        table = self.extract(raw_text, config)
        return self.render(table, config.show_line_numbers, config.output_format)


_extractor = RowExtractor()
_renderer = OutputRenderer()


def extract(raw_text: str, config: FormatConfig) -> Table:
    """Convenience function: raw text to rows."""
    return _extractor.extract(raw_text, config)


def render(table: Table, show_line_numbers: bool, output_format: OutputFormat) -> str:
    """Convenience function: rows to formatted text."""
    return _renderer.render(table, show_line_numbers, output_format)


def format_text(raw_text: str, config: Optional[FormatConfig] = None) -> str:
    """
    Convenience function: raw text to formatted text.

    Equivalent to render(extract(raw_text, config), config.show_line_numbers,
    config.output_format). No length limit is applied.
    """
    if config is None:
        config = FormatConfig()
    return render(extract(raw_text, config), config.show_line_numbers, config.output_format)
