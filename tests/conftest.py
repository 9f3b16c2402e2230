"""Shared pytest fixtures for layout and CLI integration checks."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

PACKAGE_ROOT = Path(__file__).resolve().parents[1]


@dataclass(frozen=True, slots=True)
class CliResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@pytest.fixture(autouse=True)
def _isolated_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "COLUMNIST_ROOT",
        "COLUMNIST_COLUMN_WIDTH",
        "COLUMNIST_SEPARATOR_WIDTH",
        "COLUMNIST_ENCODING",
        "COLUMNIST_JUSTIFY_LAST_LINE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def package_root() -> Path:
    return PACKAGE_ROOT


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / ".columnist").mkdir(parents=True)
    return root


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "input"
    directory.mkdir()
    (directory / "a.txt").write_text("1234\n5678\n", encoding="utf-8")
    (directory / "b.txt").write_text("abcd\nefgh\n\nijkl\n", encoding="utf-8")
    return directory


@pytest.fixture
def cli_env(package_root: Path, project_root: Path) -> dict[str, str]:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH", "")
    root = str(package_root / "src")
    env["PYTHONPATH"] = root if not existing else f"{root}{os.pathsep}{existing}"
    env["COLUMNIST_ROOT"] = str(project_root)
    for name in (
        "COLUMNIST_COLUMN_WIDTH",
        "COLUMNIST_SEPARATOR_WIDTH",
        "COLUMNIST_ENCODING",
        "COLUMNIST_JUSTIFY_LAST_LINE",
    ):
        env.pop(name, None)
    return env


@pytest.fixture
def run_columnist(package_root: Path, cli_env: dict[str, str]) -> Callable[..., CliResult]:
    def _run(args: list[str], timeout: float = 30.0) -> CliResult:
        completed = subprocess.run(
            [sys.executable, "-m", "columnist", *args],
            cwd=package_root,
            env=cli_env,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return CliResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return _run
