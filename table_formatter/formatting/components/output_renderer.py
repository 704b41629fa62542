"""
OutputRenderer Component

Renders extracted rows as tab-separated, CSV, Markdown, space-aligned or
one-cell-per-line text, with optional zero-padded line numbers.
"""

import logging
from typing import Callable, Dict, List

from ..data_models import OutputFormat, Row, Table

logger = logging.getLogger(__name__)


class OutputRenderer:
    """Renders a table of cell rows into formatted text."""

    ALIGNED_PADDING = 2
    MARKDOWN_SEPARATOR_CELL = "---"

    def render(self, table: Table, show_line_numbers: bool, output_format: OutputFormat) -> str:
        """
        Render rows in the requested format.

        Args:
            table: Rows of cells
            show_line_numbers: Prefix each row with its 1-based index
            output_format: Target format

        Returns:
            Rendered rows joined by newlines (empty string for no rows)
        """
        output_format = OutputFormat.coerce(output_format)
        if not table:
            return ""

        if output_format is OutputFormat.MARKDOWN:
            lines = self._render_markdown(table, show_line_numbers)
        else:
            render_row = self._row_renderer(table, output_format)
            lines = []
            for index, row in enumerate(table, 1):
                body = render_row(row)
                if show_line_numbers:
                    body = f"{self.line_number(index)} {body}"
                lines.append(body)

        logger.debug(f"Rendered {len(table)} rows as {output_format.value}")
        return "\n".join(lines)

    def line_number(self, index: int) -> str:
        """Zero-pad a 1-based index to three digits (wider indices keep their width)."""
        return f"{index:03d}"

    def _row_renderer(self, table: Table, output_format: OutputFormat) -> Callable[[Row], str]:
        if output_format is OutputFormat.ALIGNED:
            widths = self.column_widths(table)
            return lambda row: self.render_aligned_row(row, widths)

        renderers: Dict[OutputFormat, Callable[[Row], str]] = {
            OutputFormat.TAB: "\t".join,
            OutputFormat.CSV: self.render_csv_row,
            OutputFormat.NONE: "\n".join,
        }
        return renderers[output_format]

    def render_csv_row(self, row: Row) -> str:
        """Join cells with commas, quoting any cell that holds a comma or quote."""
        return ",".join(self.escape_csv_cell(cell) for cell in row)

    def escape_csv_cell(self, cell: str) -> str:
        """
        Quote a CSV cell when needed.

        Example:
            'He said "hi", ok' -> '"He said ""hi"", ok"'
        """
        if "," in cell or '"' in cell:
            escaped = cell.replace('"', '""')
            return f'"{escaped}"'
        return cell

    def _render_markdown(self, table: Table, show_line_numbers: bool) -> List[str]:
        lines = []
        for index, row in enumerate(table, 1):
            cells = list(row)
            if show_line_numbers:
                cells.insert(0, self.line_number(index))
            lines.append(self.render_markdown_row(cells))

            # Header separator goes under the first row of multi-row tables
            if index == 1 and len(table) > 1:
                lines.append(self.render_markdown_row([self.MARKDOWN_SEPARATOR_CELL] * len(cells)))
        return lines

    def render_markdown_row(self, cells: Row) -> str:
        return "| " + " | ".join(cells) + " |"

    def column_widths(self, table: Table) -> List[int]:
        """
        Longest cell length per column index.

        Short rows contribute nothing to columns they lack.
        """
        widths: List[int] = []
        for row in table:
            for column, cell in enumerate(row):
                if column == len(widths):
                    widths.append(len(cell))
                else:
                    widths[column] = max(widths[column], len(cell))
        return widths

    def render_aligned_row(self, row: Row, widths: List[int]) -> str:
        """Pad each cell to its column width plus two spaces, with no separator."""
        return "".join(
            cell.ljust(widths[column] + self.ALIGNED_PADDING)
            for column, cell in enumerate(row)
        )
