"""CLI command handlers for config.* operations."""

from collections.abc import Callable
from functools import partial
from typing import Annotated, Any

from cyclopts import App, Parameter

from columnist.lib.ops.config import ConfigShowInput, config_show_sync
from columnist.lib.ops.registry import get_all_operations

Emitter = Callable[[Any], None]


def _config_show(
    emit: Emitter,
    project_root: Annotated[
        str | None,
        Parameter(name="--project-root", help="Project directory holding .columnist/."),
    ] = None,
) -> None:
    emit(config_show_sync(ConfigShowInput(project_root=project_root)))


def register_config_commands(app: App, emit: Emitter) -> tuple[set[str], dict[str, str]]:
    handlers: dict[str, Callable[[], Callable[..., None]]] = {
        "config.show": lambda: partial(_config_show, emit),
    }

    registered: set[str] = set()
    descriptions: dict[str, str] = {}

    for op in get_all_operations():
        if op.cli_group != "config" or op.mcp_only:
            continue
        handler_factory = handlers.get(op.name)
        if handler_factory is None:
            raise ValueError(f"No CLI handler registered for operation '{op.name}'")
        handler = handler_factory()
        handler.__name__ = f"cmd_{op.cli_group}_{op.cli_name}"
        app.command(handler, name=op.cli_name, help=op.description)
        registered.add(f"{op.cli_group}.{op.cli_name}")
        descriptions[op.name] = op.description

    return registered, descriptions
