"""CLI command handlers for columns.* operations."""

from collections.abc import Callable
from functools import partial
from typing import Annotated, Any

from cyclopts import App, Parameter

from columnist.lib.config.settings import parse_bool
from columnist.lib.ops.layout import (
    ColumnsPreviewInput,
    ColumnsRenderInput,
    columns_preview_sync,
    columns_render_sync,
)
from columnist.lib.ops.registry import get_all_operations

Emitter = Callable[[Any], None]

InputOption = Annotated[
    str,
    Parameter(
        name=["--input", "-i"],
        help="Required. Path to directory containing files to process.",
    ),
]
OutputOption = Annotated[
    str,
    Parameter(name=["--output", "-o"], help="Required. Path and name of file to write to."),
]
ColumnWidthOption = Annotated[
    int | None,
    Parameter(
        name=["--column-width", "-c"],
        help="Width of columns to write. Must be >= the longest word in the input files.",
    ),
]
SeparatorWidthOption = Annotated[
    int | None,
    Parameter(
        name=["--separator-width", "-s"],
        help="Width of column separator. Must be >= 0. [default: 4]",
    ),
]
EncodingOption = Annotated[
    str | None,
    Parameter(name=["--encoding", "-e"], help="Encoding of files to process. [default: utf-8]"),
]
JustifyLastOption = Annotated[
    str | None,
    Parameter(
        name=["--justify-last", "-j"],
        help="true|false. Justify last line of paragraphs (otherwise aligns left). "
        "[default: true]",
    ),
]


def _justify_flag(raw: str | None) -> bool | None:
    if raw is None:
        return None
    return parse_bool(raw, source="--justify-last")


def _columns_render(
    emit: Emitter,
    input_path: InputOption = "",
    output_path: OutputOption = "",
    column_width: ColumnWidthOption = None,
    separator_width: SeparatorWidthOption = None,
    encoding: EncodingOption = None,
    justify_last: JustifyLastOption = None,
) -> None:
    emit(
        columns_render_sync(
            ColumnsRenderInput(
                input_path=input_path,
                output_path=output_path,
                column_width=column_width,
                separator_width=separator_width,
                encoding=encoding,
                justify_last_line=_justify_flag(justify_last),
            )
        )
    )


def _columns_preview(
    emit: Emitter,
    input_path: InputOption = "",
    column_width: ColumnWidthOption = None,
    separator_width: SeparatorWidthOption = None,
    encoding: EncodingOption = None,
    justify_last: JustifyLastOption = None,
) -> None:
    emit(
        columns_preview_sync(
            ColumnsPreviewInput(
                input_path=input_path,
                column_width=column_width,
                separator_width=separator_width,
                encoding=encoding,
                justify_last_line=_justify_flag(justify_last),
            )
        )
    )


def render_handler(emit: Emitter) -> Callable[..., None]:
    """Build the `columns render` handler bound to ``emit``."""

    return partial(_columns_render, emit)


def register_columns_commands(app: App, emit: Emitter) -> tuple[set[str], dict[str, str]]:
    handlers: dict[str, Callable[[], Callable[..., None]]] = {
        "columns.render": lambda: render_handler(emit),
        "columns.preview": lambda: partial(_columns_preview, emit),
    }

    registered: set[str] = set()
    descriptions: dict[str, str] = {}

    for op in get_all_operations():
        if op.cli_group != "columns" or op.mcp_only:
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
