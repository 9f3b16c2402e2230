"""Full justification of a single line."""

from __future__ import annotations

import re

from columnist.lib.layout.padding import SPACE, pad_to

# ASCII whitespace only; non-breaking and other Unicode spaces stay in their word.
_WORD_GAP = re.compile(r"[ \t\n\x0b\f\r]+")


def split_words(text: str) -> list[str]:
    """Split ``text`` at runs of ASCII whitespace.

    Leading whitespace yields an empty first word, so it still counts as a
    gap. Trailing empty words are dropped.

    >>> split_words(" a\\u00a0b  c ")
    ['', 'a\\xa0b', 'c']
    """

    words = _WORD_GAP.split(text)
    while words and not words[-1]:
        words.pop()
    return words


def gap_widths(gap_count: int, spaces_to_add: int) -> list[int]:
    """Spread ``spaces_to_add`` spaces over ``gap_count`` word gaps, left first.

    Equivalent to handing out one space per gap in a cycle starting at gap 0,
    so earlier gaps are never narrower than later ones.

    >>> gap_widths(2, 3)
    [2, 1]
    >>> gap_widths(3, -1)
    [0, 0, 0]
    """

    if gap_count <= 0:
        return []
    if spaces_to_add <= 0:
        return [0] * gap_count
    base, extra = divmod(spaces_to_add, gap_count)
    return [base + 1 if index < extra else base for index in range(gap_count)]


def justify(text: str, width: int) -> str:
    """Stretch ``text`` to exactly ``width`` characters by widening word gaps.

    A single word is left-aligned and padded on the right. When ``width`` is
    shorter than ``text`` the gaps collapse from the right instead, e.g.
    ``justify("a b c", 4) == "a bc"``.
    """

    words = split_words(text)
    if not words:
        return pad_to(width, "")

    gap_count = max(len(words) - 1, 1)
    removed_by_split = gap_count if len(words) > 1 else 0
    spaces_to_add = removed_by_split + (width - len(text))

    padded = list(words)
    for index, extra in enumerate(gap_widths(gap_count, spaces_to_add)):
        padded[index] += SPACE * extra
    return pad_to(width, "".join(padded))
