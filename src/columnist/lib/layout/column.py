"""Paragraph-aware column building for one document."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TypeAlias

from columnist.lib.layout.justify import justify
from columnist.lib.layout.padding import SPACE, pad_to, padding
from columnist.lib.layout.result import Err, Ok, Result
from columnist.lib.layout.wrap import wrap

Column: TypeAlias = list[str]


def space_needed(buffer: str, line: str) -> bool:
    """Return True when a joining space belongs between ``buffer`` and ``line``."""

    return (
        buffer != ""
        and line != ""
        and not buffer.endswith(SPACE)
        and not line.startswith(SPACE)
    )


@dataclass(slots=True)
class ColumnBuilder:
    """Accumulates one document's text and emits fixed-width lines.

    ``buffer`` holds the pending text of the current paragraph and ``output``
    the finished lines. A builder serves exactly one document.
    """

    width: int
    justify_last_line: bool = True
    buffer: str = ""
    output: Column = field(default_factory=list)

    def _flush(self) -> None:
        if not self.buffer.strip():
            return
        if self.justify_last_line:
            self.output.append(justify(self.buffer, self.width))
        else:
            self.output.append(pad_to(self.width, self.buffer))

    def feed(self, raw_line: str) -> Result[None]:
        line = raw_line.strip()
        if space_needed(self.buffer, line):
            self.buffer += SPACE
        self.buffer += line

        if line == "":
            # paragraph break
            self._flush()
            self.buffer = ""
            self.output.append(padding(self.width))
            return Ok(None)

        while len(self.buffer) > self.width:
            wrapped = wrap(self.buffer, self.width)
            if isinstance(wrapped, Err):
                return wrapped
            self.output.append(wrapped.value.line)
            self.buffer = wrapped.value.remainder
        return Ok(None)

    def finish(self) -> Column:
        self._flush()
        self.buffer = ""
        return self.output


def build_column(
    document: Iterable[str],
    width: int,
    justify_last_line: bool = True,
) -> Result[Column]:
    """Lay out every line of ``document`` as a column of ``width``-wide lines."""

    builder = ColumnBuilder(width=width, justify_last_line=justify_last_line)
    for raw_line in document:
        fed = builder.feed(raw_line)
        if isinstance(fed, Err):
            return fed
    return Ok(builder.finish())
