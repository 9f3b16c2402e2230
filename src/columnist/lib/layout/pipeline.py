"""End-to-end layout of several documents into combined rows."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from columnist.lib.layout.column import Column, build_column
from columnist.lib.layout.result import Err, Ok, Result
from columnist.lib.layout.rows import combine_rows

logger = structlog.get_logger(__name__)


def build_columns(
    documents: Sequence[Sequence[str]],
    width: int,
    justify_last_line: bool = True,
) -> Result[list[Column]]:
    """Build one column per document, stopping at the first failure."""

    columns: list[Column] = []
    for index, document in enumerate(documents):
        built = build_column(document, width, justify_last_line)
        if isinstance(built, Err):
            logger.warning(
                "Document does not fit column width.",
                document_index=index,
                column_width=width,
            )
            return built
        columns.append(built.value)
    return Ok(columns)


def process(
    documents: Sequence[Sequence[str]],
    column_width: int,
    separator_width: int,
    justify_last_line: bool = True,
) -> Result[list[str]]:
    """Lay out ``documents`` as justified columns and combine them into rows."""

    if column_width <= 0:
        raise ValueError(f"Column width must be greater than 0, got {column_width}.")
    if separator_width < 0:
        raise ValueError(
            f"Separator width must be greater than or equal to 0, got {separator_width}."
        )

    built = build_columns(documents, column_width, justify_last_line)
    if isinstance(built, Err):
        return built
    rows = combine_rows(built.value, column_width, separator_width)
    logger.debug("Combined columns into rows.", columns=len(built.value), rows=len(rows))
    return Ok(rows)
