"""Fixed-width space padding."""

from __future__ import annotations

SPACE = " "


def padding(width: int) -> str:
    """Return ``width`` spaces, or an empty string for non-positive widths."""

    return SPACE * max(width, 0)


def pad_to(width: int, text: str) -> str:
    """Right-pad ``text`` with spaces up to ``width``; longer text is returned as-is."""

    if len(text) >= width:
        return text
    return text + padding(width - len(text))
