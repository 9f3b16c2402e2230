"""Remove-from-the-right wrapping."""

from __future__ import annotations

import pytest

from columnist.lib.layout import ColumnWidthTooNarrow, Err, LayoutError, Ok, WrappedLine, wrap


def test_wrap_fails_when_word_is_wider_than_column() -> None:
    result = wrap("ab", 1)

    assert result == Err(ColumnWidthTooNarrow(width=1))
    assert not result.is_ok()
    assert "(1)" in result.error.message


def test_unwrapping_error_raises_layout_error() -> None:
    result = wrap("enormous", 3)

    with pytest.raises(LayoutError, match="longer than specified column width \\(3\\)"):
        result.unwrap()


@pytest.mark.parametrize(
    ("width", "line", "remainder"),
    [
        (5, "first", "second third"),
        (12, "first second", "third"),
        (18, "first second third", ""),
    ],
)
def test_wrap_takes_whole_words_up_to_width(width: int, line: str, remainder: str) -> None:
    assert wrap("first second third", width) == Ok(WrappedLine(line=line, remainder=remainder))


@pytest.mark.parametrize(
    ("width", "line", "remainder"),
    [
        (6, "first ", "second third"),
        (13, "first  second", "third"),
        (19, "first  second third", ""),
        (20, "first  second  third", ""),
    ],
)
def test_wrap_pads_line_left_to_right(width: int, line: str, remainder: str) -> None:
    assert wrap("first second third", width) == Ok(WrappedLine(line=line, remainder=remainder))


def test_wrap_preserves_word_order_across_line_and_remainder() -> None:
    text = "one two three four five six seven eight nine ten"
    for width in range(5, len(text) + 1):
        wrapped = wrap(text, width).unwrap()
        assert len(wrapped.line) == width
        assert wrapped.line.split() + wrapped.remainder.split() == text.split()


def test_wrap_breaks_only_at_plain_spaces() -> None:
    assert wrap("alpha\tbeta", 5) == Err(ColumnWidthTooNarrow(width=5))
    assert wrap("a\u00a0b c", 3) == Ok(WrappedLine(line="a\u00a0b", remainder="c"))


@pytest.mark.parametrize(
    ("buffer", "remainder"),
    [
        ("aaaa  bbbb", " bbbb"),
        ("aaaa   bbbb", "  bbbb"),
        ("aaaa  bbbb cc", " bbbb cc"),
    ],
)
def test_wrap_carries_extra_spaces_into_remainder(buffer: str, remainder: str) -> None:
    assert wrap(buffer, 4) == Ok(WrappedLine(line="aaaa", remainder=remainder))
