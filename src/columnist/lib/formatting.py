"""Shared formatting protocol and context for operation outputs.

Lives in the lib layer so both operation types (lib/) and CLI code (cli/)
can depend on it without introducing lib -> cli imports.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Parameters passed to text formatters."""

    verbosity: int = 0  # 0=normal, 1=verbose, -1=quiet


@runtime_checkable
class TextFormattable(Protocol):
    """Protocol for output dataclasses that provide a human-readable text format."""

    def format_text(self, ctx: FormatContext | None = None) -> str: ...


def kv_block(pairs: list[tuple[str, str | None]]) -> str:
    """Render key: value pairs, skipping None values.

    >>> kv_block([("Output", "out.txt"), ("Rows", "12"), ("Encoding", None)])
    'Output: out.txt\\nRows: 12'
    """
    return "\n".join(f"{k}: {v}" for k, v in pairs if v is not None)
