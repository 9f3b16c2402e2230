"""MCP integration checks via SDK stdio client."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest
from mcp.client.session import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client
from mcp.server.fastmcp.exceptions import ToolError

from columnist.lib.ops import get_operation
from columnist.server.main import build_tool_handler


def _payload_from_call_result(result: Any) -> dict[str, Any]:
    structured = getattr(result, "structuredContent", None)
    if isinstance(structured, dict):
        return structured

    for block in getattr(result, "content", []):
        text = getattr(block, "text", None)
        if isinstance(text, str) and text.strip():
            try:
                payload = json.loads(text)
            except json.JSONDecodeError:
                continue
            if isinstance(payload, dict):
                return payload

    raise AssertionError("Call result did not include a JSON object payload")


@pytest.mark.asyncio
async def test_mcp_tools_registered_and_callable(
    package_root: Path,
    cli_env: dict[str, str],
    input_dir: Path,
    tmp_path: Path,
) -> None:
    params = StdioServerParameters(
        command=sys.executable,
        args=["-m", "columnist", "serve"],
        env=cli_env,
        cwd=package_root,
    )

    async with stdio_client(params) as (read_stream, write_stream), ClientSession(
        read_stream, write_stream
    ) as session:
        await session.initialize()

        listed = await session.list_tools()
        names = {tool.name for tool in listed.tools}
        assert {"columns_render", "columns_preview", "config_show"}.issubset(names)

        preview = await session.call_tool(
            "columns_preview",
            {"input_path": str(input_dir), "column_width": 4, "separator_width": 1},
        )
        assert preview.isError is False
        preview_payload = _payload_from_call_result(preview)
        assert preview_payload["rows"][:2] == ["1234 abcd", "5678 efgh"]

        output_path = tmp_path / "mcp-out.txt"
        rendered = await session.call_tool(
            "columns_render",
            {
                "input_path": str(input_dir),
                "output_path": str(output_path),
                "column_width": 9,
                "justify_last_line": False,
            },
        )
        assert rendered.isError is False
        assert _payload_from_call_result(rendered)["rows"] == 3
        assert output_path.is_file()

        too_narrow = await session.call_tool(
            "columns_preview",
            {"input_path": str(input_dir), "column_width": 2},
        )
        assert too_narrow.isError is True
        error_text = too_narrow.content[0].text
        error = json.loads(error_text[error_text.index("{") :])
        assert error["kind"] == "column_width_too_narrow"
        assert error["width"] == 2


@pytest.mark.asyncio
async def test_tool_reports_narrow_column_as_structured_error(
    input_dir: Path, project_root: Path
) -> None:
    preview = build_tool_handler(get_operation("columns.preview"))

    with pytest.raises(ToolError) as excinfo:
        await preview(input_path=str(input_dir), column_width=2, project_root=str(project_root))

    assert json.loads(str(excinfo.value)) == {
        "kind": "column_width_too_narrow",
        "message": (
            "Text contained a word longer than specified column width (2). "
            "Please try a larger width value."
        ),
        "width": 2,
    }


@pytest.mark.asyncio
async def test_tool_reports_missing_input_as_structured_error(
    tmp_path: Path, project_root: Path
) -> None:
    preview = build_tool_handler(get_operation("columns.preview"))
    missing = tmp_path / "missing"

    with pytest.raises(ToolError) as excinfo:
        await preview(input_path=str(missing), column_width=8, project_root=str(project_root))

    error = json.loads(str(excinfo.value))
    assert error["kind"] == "path_empty_or_not_found"
    assert error["path"] == str(missing)


@pytest.mark.asyncio
async def test_tool_returns_jsonable_result(input_dir: Path, project_root: Path) -> None:
    preview = build_tool_handler(get_operation("columns.preview"))

    result = await preview(
        input_path=str(input_dir),
        column_width=4,
        separator_width=1,
        project_root=str(project_root),
    )

    assert isinstance(result, dict)
    assert result["rows"][:2] == ["1234 abcd", "5678 efgh"]
