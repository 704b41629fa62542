"""
Components for the table formatting pipeline.

RowExtractor turns raw text into rows of cells; OutputRenderer turns rows
into formatted text.
"""

from .row_extractor import RowExtractor
from .output_renderer import OutputRenderer

__all__ = [
    "RowExtractor",
    "OutputRenderer",
]
