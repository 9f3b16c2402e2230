"""Discriminated layout results.

The layout core never raises for bad input text. Each step returns either
``Ok(value)`` or ``Err(error)`` and callers decide whether to abort.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar

T = TypeVar("T")


class LayoutError(ValueError):
    """Raised when an ``Err`` result is unwrapped at an operation boundary."""

    def __init__(self, error: ColumnWidthTooNarrow) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True, slots=True)
class ColumnWidthTooNarrow:
    """A whitespace-delimited word is longer than the column width."""

    width: int

    @property
    def kind(self) -> str:
        return "column_width_too_narrow"

    @property
    def message(self) -> str:
        return (
            f"Text contained a word longer than specified column width ({self.width}). "
            "Please try a larger width value."
        )


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    error: ColumnWidthTooNarrow

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise LayoutError(self.error)


V = TypeVar("V")
Result: TypeAlias = Ok[V] | Err
