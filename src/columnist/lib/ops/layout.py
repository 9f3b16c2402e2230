"""Column layout operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from columnist.lib.documents import list_documents, read_documents, write_lines
from columnist.lib.formatting import kv_block
from columnist.lib.layout import process
from columnist.lib.ops._settings import LayoutSettings, resolve_layout_settings
from columnist.lib.ops.registry import OperationSpec, operation

if TYPE_CHECKING:
    from columnist.lib.formatting import FormatContext

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ColumnsRenderInput:
    input_path: str = ""
    output_path: str = ""
    column_width: int | None = None
    separator_width: int | None = None
    encoding: str | None = None
    justify_last_line: bool | None = None
    project_root: str | None = None


@dataclass(frozen=True, slots=True)
class ColumnsPreviewInput:
    input_path: str = ""
    column_width: int | None = None
    separator_width: int | None = None
    encoding: str | None = None
    justify_last_line: bool | None = None
    project_root: str | None = None


@dataclass(frozen=True, slots=True)
class RenderOutput:
    output_path: str
    documents: tuple[str, ...]
    rows: int
    column_width: int
    separator_width: int
    justify_last_line: bool

    def format_text(self, ctx: FormatContext | None = None) -> str:
        summary = f"Success: output written to {self.output_path}"
        if ctx is None or ctx.verbosity <= 0:
            return summary
        details = kv_block(
            [
                ("Documents", str(len(self.documents))),
                ("Rows", str(self.rows)),
                ("Column width", str(self.column_width)),
                ("Separator width", str(self.separator_width)),
                ("Justify last line", str(self.justify_last_line).lower()),
            ]
        )
        return f"{summary}\n{details}"


@dataclass(frozen=True, slots=True)
class PreviewOutput:
    rows: tuple[str, ...]
    documents: tuple[str, ...]
    column_width: int
    separator_width: int

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return "\n".join(self.rows)


def _require_path(raw: str, label: str) -> str:
    normalized = raw.strip()
    if not normalized:
        raise ValueError(f"{label} is required.")
    return normalized


def _layout_rows(input_path: str, settings: LayoutSettings) -> tuple[list[str], list[str]]:
    paths = list_documents(input_path)
    logger.debug(
        "Laying out documents.",
        documents=len(paths),
        column_width=settings.column_width,
        separator_width=settings.separator_width,
    )
    documents = read_documents(paths, settings.encoding)
    rows = process(
        documents,
        settings.column_width,
        settings.separator_width,
        settings.justify_last_line,
    ).unwrap()
    return [path.as_posix() for path in paths], rows


def columns_render_sync(payload: ColumnsRenderInput) -> RenderOutput:
    input_path = _require_path(payload.input_path, "Input path")
    output_path = _require_path(payload.output_path, "Output path")
    settings = resolve_layout_settings(
        project_root=payload.project_root,
        column_width=payload.column_width,
        separator_width=payload.separator_width,
        encoding=payload.encoding,
        justify_last_line=payload.justify_last_line,
    )

    documents, rows = _layout_rows(input_path, settings)
    destination = write_lines(rows, output_path)
    logger.info("Wrote column rows.", output_path=destination.as_posix(), rows=len(rows))
    return RenderOutput(
        output_path=destination.as_posix(),
        documents=tuple(documents),
        rows=len(rows),
        column_width=settings.column_width,
        separator_width=settings.separator_width,
        justify_last_line=settings.justify_last_line,
    )


def columns_preview_sync(payload: ColumnsPreviewInput) -> PreviewOutput:
    input_path = _require_path(payload.input_path, "Input path")
    settings = resolve_layout_settings(
        project_root=payload.project_root,
        column_width=payload.column_width,
        separator_width=payload.separator_width,
        encoding=payload.encoding,
        justify_last_line=payload.justify_last_line,
    )
    documents, rows = _layout_rows(input_path, settings)
    return PreviewOutput(
        rows=tuple(rows),
        documents=tuple(documents),
        column_width=settings.column_width,
        separator_width=settings.separator_width,
    )


async def columns_render(payload: ColumnsRenderInput) -> RenderOutput:
    return columns_render_sync(payload)


async def columns_preview(payload: ColumnsPreviewInput) -> PreviewOutput:
    return columns_preview_sync(payload)


operation(
    OperationSpec[ColumnsRenderInput, RenderOutput](
        name="columns.render",
        handler=columns_render,
        sync_handler=columns_render_sync,
        input_type=ColumnsRenderInput,
        output_type=RenderOutput,
        cli_group="columns",
        cli_name="render",
        mcp_name="columns_render",
        description="Lay out every file under a directory as justified columns and write them.",
    )
)

operation(
    OperationSpec[ColumnsPreviewInput, PreviewOutput](
        name="columns.preview",
        handler=columns_preview,
        sync_handler=columns_preview_sync,
        input_type=ColumnsPreviewInput,
        output_type=PreviewOutput,
        cli_group="columns",
        cli_name="preview",
        mcp_name="columns_preview",
        description="Lay out every file under a directory as justified columns without writing.",
    )
)
