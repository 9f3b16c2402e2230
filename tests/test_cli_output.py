"""Output mode rendering for operation payloads."""

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from columnist.cli.output import OutputConfig, emit, normalize_output_format
from columnist.lib.ops.layout import PreviewOutput, RenderOutput


@dataclass(frozen=True, slots=True)
class _Plain:
    name: str
    widths: tuple[int, ...]


def _render_output() -> RenderOutput:
    return RenderOutput(
        output_path="out.txt",
        documents=("a.txt", "b.txt"),
        rows=3,
        column_width=9,
        separator_width=2,
        justify_last_line=True,
    )


def test_normalize_output_format_precedence() -> None:
    assert normalize_output_format(requested=None, json_mode=False, porcelain_mode=False) == "text"
    assert normalize_output_format(requested="JSON", json_mode=False, porcelain_mode=False) == "json"
    assert normalize_output_format(requested="text", json_mode=True, porcelain_mode=False) == "json"
    assert (
        normalize_output_format(requested=None, json_mode=False, porcelain_mode=True)
        == "porcelain"
    )


def test_normalize_output_format_rejects_unknown() -> None:
    with pytest.raises(SystemExit, match="--format must be one of"):
        normalize_output_format(requested="yaml", json_mode=False, porcelain_mode=False)


def test_text_mode_uses_format_text(capsys: pytest.CaptureFixture[str]) -> None:
    emit(_render_output(), OutputConfig(format="text"))

    assert capsys.readouterr().out == "Success: output written to out.txt\n"


def test_text_mode_prints_preview_rows(capsys: pytest.CaptureFixture[str]) -> None:
    preview = PreviewOutput(
        rows=("ab cd", "ef   "),
        documents=("a.txt",),
        column_width=5,
        separator_width=4,
    )

    emit(preview, OutputConfig(format="text"))

    assert capsys.readouterr().out == "ab cd\nef   \n"


def test_json_mode_serializes_dataclass(capsys: pytest.CaptureFixture[str]) -> None:
    emit(_render_output(), OutputConfig(format="json"))

    payload = json.loads(capsys.readouterr().out)
    assert payload["documents"] == ["a.txt", "b.txt"]
    assert payload["justify_last_line"] is True


def test_porcelain_mode_emits_sorted_key_values(capsys: pytest.CaptureFixture[str]) -> None:
    emit(_Plain(name="x", widths=(1, 2)), OutputConfig(format="porcelain"))

    assert capsys.readouterr().out == "name=x\twidths=[1, 2]\n"


def test_text_mode_falls_back_to_json(capsys: pytest.CaptureFixture[str]) -> None:
    emit(_Plain(name="x", widths=()), OutputConfig(format="text"))

    assert json.loads(capsys.readouterr().out) == {"name": "x", "widths": []}
