"""CLI output formatting utilities."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias, cast

from columnist.lib.formatting import FormatContext, TextFormattable
from columnist.lib.serialization import to_jsonable

OutputFormat = Literal["text", "json", "porcelain"]
JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


@dataclass(frozen=True, slots=True)
class OutputConfig:
    format: OutputFormat
    verbosity: int = 0


def _to_json_value(value: Any) -> JSONValue:
    return cast("JSONValue", to_jsonable(value))


def normalize_output_format(
    *,
    requested: str | None,
    json_mode: bool,
    porcelain_mode: bool,
) -> OutputFormat:
    """Resolve final output format from flags; the default is always "text"."""

    if json_mode:
        return "json"
    if porcelain_mode:
        return "porcelain"

    if requested is None or requested == "":
        return "text"

    normalized = requested.strip().lower()
    if normalized in {"text", "json", "porcelain"}:
        return cast("OutputFormat", normalized)
    raise SystemExit("--format must be one of: text, json, porcelain")


def _porcelain_value(value: JSONValue) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    return str(value)


def porcelain_line(payload: dict[str, JSONValue]) -> str:
    return "\t".join(f"{key}={_porcelain_value(payload[key])}" for key in sorted(payload))


def _emit_porcelain(value: Any) -> None:
    payload = _to_json_value(value)
    if isinstance(payload, dict):
        print(porcelain_line(cast("dict[str, JSONValue]", payload)))
        return
    print(payload)


def emit(value: Any, config: OutputConfig) -> None:
    """Emit one payload according to the configured output mode."""

    if config.format == "json":
        print(json.dumps(_to_json_value(value), sort_keys=True))
        return
    if config.format == "porcelain":
        _emit_porcelain(value)
        return
    if isinstance(value, TextFormattable):
        print(value.format_text(FormatContext(verbosity=config.verbosity)))
    else:
        print(json.dumps(_to_json_value(value), sort_keys=True, indent=2))
