"""Logging configuration."""

from __future__ import annotations

import logging

import pytest

from columnist.lib.logging import level_from_verbosity


@pytest.mark.parametrize(
    ("verbosity", "level"),
    [
        (-1, logging.WARNING),
        (0, logging.WARNING),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (5, logging.DEBUG),
    ],
)
def test_level_from_verbosity(verbosity: int, level: int) -> None:
    assert level_from_verbosity(verbosity) == level


def test_verbose_render_logs_to_stderr_only(run_columnist, input_dir, tmp_path) -> None:
    output_path = tmp_path / "out.txt"

    result = run_columnist(
        ["-vv", "render", "-i", str(input_dir), "-o", str(output_path), "-c", "9"]
    )

    assert result.returncode == 0, result.stderr
    assert "Wrote column rows." in result.stderr
    assert "Wrote column rows." not in result.stdout
    assert result.stdout.startswith("Success: output written to")
