"""Text layout engine: padding, justification, wrapping, columns and rows."""

from columnist.lib.layout.column import Column, ColumnBuilder, build_column, space_needed
from columnist.lib.layout.justify import gap_widths, justify, split_words
from columnist.lib.layout.padding import pad_to, padding
from columnist.lib.layout.pipeline import build_columns, process
from columnist.lib.layout.result import ColumnWidthTooNarrow, Err, LayoutError, Ok, Result
from columnist.lib.layout.rows import combine_rows, max_row_count
from columnist.lib.layout.wrap import WrappedLine, wrap

__all__ = [
    "Column",
    "ColumnBuilder",
    "ColumnWidthTooNarrow",
    "Err",
    "LayoutError",
    "Ok",
    "Result",
    "WrappedLine",
    "build_column",
    "build_columns",
    "combine_rows",
    "gap_widths",
    "justify",
    "max_row_count",
    "pad_to",
    "padding",
    "process",
    "space_needed",
    "split_words",
    "wrap",
]
