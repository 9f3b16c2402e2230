"""Tool payload codec: loose MCP arguments in, typed inputs and error payloads out."""

from __future__ import annotations

import inspect
import types
from collections.abc import Mapping
from dataclasses import MISSING, fields
from typing import Any, TypeVar, Union, cast, get_args, get_origin, get_type_hints

from columnist.lib.config.settings import parse_bool
from columnist.lib.documents import DocumentError
from columnist.lib.layout import LayoutError

PayloadT = TypeVar("PayloadT")


def optional_inner(annotation: Any) -> Any:
    """Return ``T`` for ``T | None``; other annotations pass through."""

    if get_origin(annotation) not in (types.UnionType, Union):
        return annotation
    present = [arg for arg in get_args(annotation) if arg is not type(None)]
    return present[0] if len(present) == 1 else annotation


def coerce_scalar(annotation: Any, value: object, *, source: str) -> object:
    """Coerce one tool argument to a ``str``, ``int`` or ``bool`` input field."""

    target = optional_inner(annotation)
    if value is None:
        return None
    if target is str:
        return str(value)
    if target is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return parse_bool(value, source=source)
        return bool(value)
    if target is int:
        # Widths must be real numbers, not JSON booleans.
        if isinstance(value, bool):
            raise TypeError(f"Field '{source}' expects an integer, got bool")
        return int(cast("Any", value))
    return value


def coerce_input_payload(payload_type: type[PayloadT], raw_input: object) -> PayloadT:
    """Build an operation input dataclass from a tool call's arguments.

    Every operation input has a default for each field, so omitted arguments
    fall back to it and the config file fills the gap later.
    """

    if raw_input is None:
        data: dict[str, object] = {}
    elif isinstance(raw_input, Mapping):
        data = {
            str(key): item for key, item in cast("Mapping[object, object]", raw_input).items()
        }
    else:
        raise TypeError(f"Tool input must be an object, got {type(raw_input).__name__}")

    hints = get_type_hints(payload_type)
    kwargs: dict[str, object] = {}
    for field in fields(cast("Any", payload_type)):
        if field.name in data:
            kwargs[field.name] = coerce_scalar(
                hints[field.name], data[field.name], source=field.name
            )
        elif field.default is MISSING:
            raise TypeError(f"Missing required field '{field.name}'")
    return payload_type(**kwargs)


def tool_signature(payload_type: type[object]) -> inspect.Signature:
    """Keyword-only signature FastMCP turns into the tool's input schema."""

    hints = get_type_hints(payload_type)
    return inspect.Signature(
        parameters=[
            inspect.Parameter(
                name=field.name,
                kind=inspect.Parameter.KEYWORD_ONLY,
                default=inspect.Parameter.empty if field.default is MISSING else field.default,
                annotation=hints[field.name],
            )
            for field in fields(cast("Any", payload_type))
        ]
    )


def error_payload(error: LayoutError | DocumentError) -> dict[str, object]:
    """Describe a failed layout or document step for tool callers.

    ``kind`` discriminates the failure. Layout failures carry the offending
    ``width`` and document failures the ``path`` or ``encoding`` involved.

    >>> from columnist.lib.layout import ColumnWidthTooNarrow
    >>> error_payload(LayoutError(ColumnWidthTooNarrow(width=2)))["width"]
    2
    """

    if isinstance(error, LayoutError):
        return {
            "kind": error.error.kind,
            "message": error.error.message,
            "width": error.error.width,
        }
    return {"kind": error.kind, "message": str(error), **error.detail()}
