"""Path resolution helpers for project-scoped config files."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIR_NAME = ".columnist"
CONFIG_FILE_NAME = "config.toml"


def resolve_project_root(explicit: Path | None = None) -> Path:
    """Resolve the project root that owns `.columnist/config.toml`.

    Precedence:
    1. Explicit function argument.
    2. `COLUMNIST_ROOT` environment variable.
    3. Current directory / ancestors containing `.columnist/` or `.git`.
    4. Current working directory.
    """

    if explicit is not None:
        return explicit.expanduser().resolve()

    env_root = os.getenv("COLUMNIST_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path.cwd().resolve()
    candidate = cwd
    while True:
        if (candidate / CONFIG_DIR_NAME).is_dir():
            return candidate
        if (candidate / ".git").exists():
            return candidate

        parent = candidate.parent
        if parent == candidate:
            break
        candidate = parent

    return cwd


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME
