"""Side-by-side row interleaving of finished columns."""

from __future__ import annotations

from collections.abc import Sequence

from columnist.lib.layout.padding import padding


def max_row_count(columns: Sequence[Sequence[str]]) -> int:
    return max((len(column) for column in columns), default=0)


def combine_rows(
    columns: Sequence[Sequence[str]],
    width: int,
    separator_width: int,
) -> list[str]:
    """Zip ``columns`` into rows, filling short columns with blank cells.

    >>> combine_rows([["a1"], ["b1", "b2"]], 2, 1)
    ['a1 b1', '   b2']
    """

    blank = padding(width)
    separator = padding(separator_width)
    rows: list[str] = []
    for index in range(max_row_count(columns)):
        cells = [
            column[index] if index < len(column) and column[index] else blank
            for column in columns
        ]
        rows.append(separator.join(cells))
    return rows
