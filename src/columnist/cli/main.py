"""Cyclopts CLI entry point for columnist."""

from __future__ import annotations

import sys
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog
from cyclopts import App

from columnist import __version__
from columnist.cli.columns_cmd import register_columns_commands, render_handler
from columnist.cli.config_cmd import register_config_commands
from columnist.cli.output import OutputConfig, normalize_output_format
from columnist.cli.output import emit as emit_output

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for current command."""

    default = GlobalOptions(output=OutputConfig(format="text"))
    return _GLOBAL_OPTIONS.get() or default


def emit(payload: object) -> None:
    """Write command output using current output format settings."""

    emit_output(payload, get_global_options().output)


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    porcelain_mode = False
    output_format: str | None = None
    verbosity = 0
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            cleaned.extend(argv[i:])
            break
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--porcelain":
            porcelain_mode = True
            i += 1
            continue
        if arg == "--format":
            if i + 1 >= len(argv):
                raise SystemExit("--format requires a value")
            output_format = argv[i + 1]
            i += 2
            continue
        if arg.startswith("--format="):
            output_format = arg.partition("=")[2]
            i += 1
            continue
        if arg in {"-v", "--verbose"}:
            verbosity += 1
            i += 1
            continue
        if arg.startswith("-v") and set(arg[1:]) == {"v"}:
            verbosity += len(arg) - 1
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    resolved = normalize_output_format(
        requested=output_format,
        json_mode=json_mode,
        porcelain_mode=porcelain_mode,
    )
    return cleaned, GlobalOptions(
        output=OutputConfig(format=resolved, verbosity=verbosity),
        verbosity=verbosity,
    )


app = App(
    name="columnist",
    help=(
        "Takes all files in the specified input directory and prints them in "
        "justified columns to the specified output file."
    ),
    version=__version__,
    help_formatter="plain",
)

columns_app = App(name="columns", help="Column layout commands", help_formatter="plain")
config_app = App(name="config", help="Project config commands", help_formatter="plain")

app.command(columns_app, name="columns")
app.command(config_app, name="config")


@app.command(name="serve")
def serve() -> None:
    """Start FastMCP server on stdio."""

    from columnist.server.main import run_server

    run_server()


_REGISTERED_CLI_COMMANDS: set[str] = set()
_REGISTERED_CLI_DESCRIPTIONS: dict[str, str] = {}


def _register_group_commands() -> None:
    modules = (
        register_columns_commands(columns_app, emit),
        register_config_commands(config_app, emit),
    )
    for commands, descriptions in modules:
        _REGISTERED_CLI_COMMANDS.update(commands)
        _REGISTERED_CLI_DESCRIPTIONS.update(descriptions)

    alias = render_handler(emit)
    alias.__name__ = "cmd_render"
    app.command(alias, name="render", help="Alias for columns render.")


def get_registered_cli_commands() -> set[str]:
    """Expose CLI operation command names for parity tests."""

    return set(_REGISTERED_CLI_COMMANDS)


def get_registered_cli_descriptions() -> dict[str, str]:
    """Expose CLI descriptions for parity tests."""

    return dict(_REGISTERED_CLI_DESCRIPTIONS)


def _operation_error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `columnist` and `python -m columnist`."""

    from columnist.lib.logging import configure_logging

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging early so structlog output goes to stderr, not stdout.
    configure_logging(
        json_mode=options.output.format == "json",
        verbosity=options.verbosity,
    )

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except (KeyError, ValueError, LookupError, OSError) as exc:
            logger.debug("Command failed.", exc_info=True)
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)


_register_group_commands()
