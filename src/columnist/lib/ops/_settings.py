"""Merge per-call layout options with project config."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from columnist.lib.config._paths import resolve_project_root
from columnist.lib.config.settings import load_config, validate_layout_settings


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    column_width: int
    separator_width: int
    encoding: str
    justify_last_line: bool


def project_root_from(raw: str | None) -> Path:
    if raw is None or not raw.strip():
        return resolve_project_root()
    return resolve_project_root(Path(raw))


def resolve_layout_settings(
    *,
    project_root: str | None,
    column_width: int | None,
    separator_width: int | None,
    encoding: str | None,
    justify_last_line: bool | None,
) -> LayoutSettings:
    """Apply explicit values over `.columnist/config.toml` and validate the result."""

    config = load_config(project_root_from(project_root))
    resolved_width = column_width if column_width is not None else config.column_width
    resolved_separator = separator_width if separator_width is not None else config.separator_width
    resolved_encoding = encoding if encoding is not None else config.encoding
    resolved_justify = (
        justify_last_line if justify_last_line is not None else config.justify_last_line
    )

    width = validate_layout_settings(
        column_width=resolved_width,
        separator_width=resolved_separator,
        encoding=resolved_encoding,
    )
    return LayoutSettings(
        column_width=width,
        separator_width=resolved_separator,
        encoding=resolved_encoding.strip(),
        justify_last_line=resolved_justify,
    )
