"""
RowExtractor Component

Splits pasted random-table text into rows of cells. Handles numbered
entries ("1 Sword", "3. Goblin ambush", "014 Trap door", "2\\- Rope"),
delimited columns, and a fallback scan for entries pasted as one
unbroken line.
"""

import re
import logging
from typing import List, Optional

from ..data_models import ColumnDelimiter, FormatConfig, Row, Table

logger = logging.getLogger(__name__)


class RowExtractor:
    """Extracts a table of cell rows from raw text."""

    # Digits, then spaces / a period / a literal backslash-hyphen, then the entry
    NUMBER_PREFIX_PATTERN = re.compile(r'^\s*(\d+)(?:\s+|\.\s*|\\-\s*)(.*)')

    # Entries numbered 1-999 inside a single run of text. The entry text stops
    # lazily before the next "<whitespace><number><whitespace>" so numbers that
    # are part of an entry's text can split it; see scan_numbered_entries.
    RUN_ON_ENTRY_PATTERN = re.compile(r'(?:^|\s)(\d{1,3})\s+((?:(?!\s+\d{1,3}\s+).)+)')

    # Only CR, LF and CRLF end a line; other Unicode separators stay in the text
    LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')

    # Order in which delimiters are tried when auto-splitting content
    DETECTION_ORDER = (
        ColumnDelimiter.TAB,
        ColumnDelimiter.COMMA,
        ColumnDelimiter.PIPE,
        ColumnDelimiter.SEMICOLON,
    )

    def extract(self, raw_text: str, config: FormatConfig) -> Table:
        """
        Extract rows from raw text.

        Args:
            raw_text: Pasted table text
            config: Extraction settings

        Returns:
            Table of rows in input order (empty for blank input)
        """
        if not raw_text or not raw_text.strip():
            return []

        lines = [line for line in self.LINE_BREAK_PATTERN.split(raw_text) if line.strip()]
        rows = [self.extract_row(line, config) for line in lines]
        strategy = "lines"

        if not rows:
            rows = [[entry] for entry in self.scan_numbered_entries(raw_text)]
            strategy = "run-on scan"

        if not config.detect_columns and config.column_count > 1:
            rows = [self.fit_row_width(row, config.column_count) for row in rows]

        logger.debug(f"Extracted {len(rows)} rows using {strategy} strategy")
        return rows

    def extract_row(self, line: str, config: FormatConfig) -> Row:
        """
        Turn a single non-blank line into its cells.

        A configured delimiter present in the raw line wins over prefix
        stripping; the prefix is then stripped from the first cell only.
        The line is split untrimmed so a delimiter at either end still
        yields an empty edge cell.

        Args:
            line: One non-blank line of input, surrounding whitespace kept
            config: Extraction settings

        Returns:
            List of cell strings (at least one)
        """
        delimiter = config.column_delimiter.value
        if config.detect_columns and delimiter in line:
            cells = self.split_cells(line, delimiter)
            cells[0] = self.strip_number_prefix(cells[0])
            return cells

        content = self.strip_number_prefix(line)

        if config.detect_columns:
            detected = self.detect_delimiter(content)
            if detected is not None:
                return self.split_cells(content, detected.value)

        return [content]

    def strip_number_prefix(self, text: str) -> str:
        """
        Remove a leading entry number.

        Example:
            "3. Goblin ambush" -> "Goblin ambush"
            "014 Trap door"    -> "Trap door"
            "7."               -> "7." (nothing follows the number)

        Args:
            text: Line or cell text

        Returns:
            Trimmed text without its numeric prefix
        """
        match = self.NUMBER_PREFIX_PATTERN.match(text)
        if match and match.group(2):
            return match.group(2).strip()
        return text.strip()

    def detect_delimiter(self, content: str) -> Optional[ColumnDelimiter]:
        """Return the first delimiter of DETECTION_ORDER present in content."""
        for delimiter in self.DETECTION_ORDER:
            if delimiter.value in content:
                return delimiter
        return None

    def split_cells(self, text: str, delimiter: str) -> Row:
        """Split text on delimiter and trim every cell."""
        return [cell.strip() for cell in text.split(delimiter)]

    def fit_row_width(self, row: Row, width: int) -> Row:
        """
        Pad with empty cells or truncate so the row has exactly `width` cells.

        Example:
            (["Sword"], 3)                -> ["Sword", "", ""]
            (["a", "b", "c", "d", "e"], 3) -> ["a", "b", "c"]
        """
        if len(row) >= width:
            return list(row[:width])
        return list(row) + [""] * (width - len(row))

    def scan_numbered_entries(self, text: str) -> List[str]:
        """
        Find numbered entries in text that has no usable line breaks.

        Example:
            "1 Sword 2 Shield 3 Potion" -> ["Sword", "Shield", "Potion"]

        Known limitation: an entry whose text contains a standalone 1-3 digit
        number ("Bag of 50 coins") is split at that number, because nothing
        distinguishes it from the start of the next entry.

        Args:
            text: Raw text

        Returns:
            Entry texts in match order, trimmed, without their numbers
        """
        return [
            match.group(2).strip()
            for match in self.RUN_ON_ENTRY_PATTERN.finditer(text)
            if match.group(2).strip()
        ]
