"""Remove-from-the-right word wrapping."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from columnist.lib.layout.justify import justify
from columnist.lib.layout.padding import SPACE
from columnist.lib.layout.result import ColumnWidthTooNarrow, Err, Ok, Result


@dataclass(frozen=True, slots=True)
class WrappedLine:
    """One justified line plus the text still waiting to be laid out."""

    line: str
    remainder: str


def wrap(buffer: str, width: int) -> Result[WrappedLine]:
    """Peel trailing words off ``buffer`` until it fits in ``width``.

    Lines only break at a plain space. Tabs and non-breaking spaces stay
    inside their word. Each peeled piece is trimmed and kept even when empty,
    so a run of spaces carries over into the remainder as leading spaces.

    Returns ``Err(ColumnWidthTooNarrow)`` when a single word is wider than
    the column, since no break point exists.
    """

    remainder: deque[str] = deque()
    head = buffer
    while len(head) > width:
        split_at = head.rfind(SPACE)
        if split_at < 0:
            return Err(ColumnWidthTooNarrow(width=width))
        remainder.appendleft(head[split_at:].strip())
        head = head[:split_at]
    return Ok(WrappedLine(line=justify(head, width), remainder=SPACE.join(remainder)))
