"""Config inspection operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from columnist.lib.config._paths import config_path
from columnist.lib.config.settings import load_config
from columnist.lib.formatting import kv_block
from columnist.lib.ops._settings import project_root_from
from columnist.lib.ops.registry import OperationSpec, operation

if TYPE_CHECKING:
    from columnist.lib.formatting import FormatContext


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    project_root: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    project_root: str
    config_path: str
    config_file_exists: bool
    column_width: int | None
    separator_width: int
    encoding: str
    justify_last_line: bool

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return kv_block(
            [
                ("project_root", self.project_root),
                ("config_path", self.config_path),
                ("config_file_exists", str(self.config_file_exists).lower()),
                (
                    "column_width",
                    "(unset)" if self.column_width is None else str(self.column_width),
                ),
                ("separator_width", str(self.separator_width)),
                ("encoding", self.encoding),
                ("justify_last_line", str(self.justify_last_line).lower()),
            ]
        )


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    root = project_root_from(payload.project_root)
    path = config_path(root)
    config = load_config(root)
    return ConfigShowOutput(
        project_root=root.as_posix(),
        config_path=path.as_posix(),
        config_file_exists=path.is_file(),
        column_width=config.column_width,
        separator_width=config.separator_width,
        encoding=config.encoding,
        justify_last_line=config.justify_last_line,
    )


async def config_show(payload: ConfigShowInput) -> ConfigShowOutput:
    return config_show_sync(payload)


operation(
    OperationSpec[ConfigShowInput, ConfigShowOutput](
        name="config.show",
        handler=config_show,
        sync_handler=config_show_sync,
        input_type=ConfigShowInput,
        output_type=ConfigShowOutput,
        cli_group="config",
        cli_name="show",
        mcp_name="config_show",
        description="Show resolved layout configuration.",
    )
)
