"""FastMCP stdio server exposing every registered columnist operation as a tool."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, cast

import structlog
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from columnist.lib.documents import DocumentError
from columnist.lib.layout import LayoutError
from columnist.lib.logging import configure_logging
from columnist.lib.ops import get_all_operations
from columnist.lib.ops.codec import coerce_input_payload, error_payload, tool_signature
from columnist.lib.ops.registry import OperationSpec
from columnist.lib.serialization import to_jsonable

logger = structlog.get_logger(__name__)

_REGISTERED_MCP_TOOLS: set[str] = set()
_REGISTERED_MCP_DESCRIPTIONS: dict[str, str] = {}


@asynccontextmanager
async def lifespan(_: FastMCP[Any]) -> AsyncIterator[None]:
    # stdout carries the protocol, so logs go to stderr as JSON.
    configure_logging(json_mode=True)
    yield


mcp = FastMCP("columnist", lifespan=lifespan)


def build_tool_handler(op: OperationSpec[Any, Any]) -> Any:
    """Wrap an operation as a FastMCP tool.

    Layout and document failures surface as a ``ToolError`` whose message is
    the JSON object from :func:`error_payload`, so clients can branch on
    ``kind`` instead of parsing prose.
    """

    async def _tool(**kwargs: object) -> object:
        payload = coerce_input_payload(op.input_type, kwargs)
        try:
            result = await op.handler(payload)
        except (LayoutError, DocumentError) as exc:
            details = error_payload(exc)
            logger.warning("Tool call failed.", tool=op.mcp_name, kind=details["kind"])
            raise ToolError(json.dumps(details)) from exc
        return to_jsonable(result)

    _tool.__name__ = f"tool_{op.mcp_name}"
    _tool.__doc__ = op.description
    cast("Any", _tool).__signature__ = tool_signature(op.input_type)
    return _tool


def _register_operation_tools() -> None:
    for op in get_all_operations():
        if op.cli_only:
            continue
        mcp.tool(name=op.mcp_name, description=op.description)(build_tool_handler(op))
        _REGISTERED_MCP_TOOLS.add(op.mcp_name)
        _REGISTERED_MCP_DESCRIPTIONS[op.name] = op.description


def get_registered_mcp_tools() -> set[str]:
    return set(_REGISTERED_MCP_TOOLS)


def get_registered_mcp_descriptions() -> dict[str, str]:
    return dict(_REGISTERED_MCP_DESCRIPTIONS)


def run_server() -> None:
    """Serve tools over stdio until the client disconnects."""

    mcp.run(transport="stdio")


_register_operation_tools()
