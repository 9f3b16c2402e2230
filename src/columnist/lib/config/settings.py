"""Project-level layout config loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

from columnist.lib.config._paths import config_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ColumnistConfig:
    """Resolved layout defaults; CLI flags and tool inputs take precedence."""

    column_width: int | None = None
    separator_width: int = 4
    encoding: str = "utf-8"
    justify_last_line: bool = True


_SECTION_KEY_MAP: dict[str, dict[str, str]] = {
    "layout": {
        "column_width": "column_width",
        "width": "column_width",
        "separator_width": "separator_width",
        "justify_last_line": "justify_last_line",
        "justify_last": "justify_last_line",
    },
    "input": {
        "encoding": "encoding",
    },
}

_TOP_LEVEL_KEY_MAP: dict[str, str] = {
    "column_width": "column_width",
    "separator_width": "separator_width",
    "encoding": "encoding",
    "justify_last_line": "justify_last_line",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "COLUMNIST_COLUMN_WIDTH": "column_width",
    "COLUMNIST_SEPARATOR_WIDTH": "separator_width",
    "COLUMNIST_ENCODING": "encoding",
    "COLUMNIST_JUSTIFY_LAST_LINE": "justify_last_line",
}

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _expected_type_name(field_name: str) -> str:
    if field_name in {"column_width", "separator_width"}:
        return "int"
    if field_name == "justify_last_line":
        return "bool"
    return "str"


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "int":
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            raise ValueError(
                f"Invalid value for '{source}': expected int, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if expected == "bool":
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    normalized = raw_value.strip()
    if not normalized:
        raise ValueError(f"Invalid value for '{source}': expected non-empty string.")
    return normalized


def parse_bool(raw_value: str, *, source: str) -> bool:
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid value for '{source}': expected true|false, got {raw_value!r}.")


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    expected = _expected_type_name(field_name)
    if expected == "int":
        try:
            return int(raw_value.strip())
        except ValueError as error:
            raise ValueError(
                f"Invalid environment override '{env_name}': expected int, got {raw_value!r}."
            ) from error

    if expected == "bool":
        return parse_bool(raw_value, source=env_name)

    normalized = raw_value.strip()
    if not normalized:
        raise ValueError(
            f"Invalid environment override '{env_name}': expected non-empty string."
        )
    return normalized


def _default_values() -> dict[str, object]:
    defaults = ColumnistConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(ColumnistConfig)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        section_map = _SECTION_KEY_MAP.get(key)
        if section_map is not None:
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
            for section_key, section_value in cast("dict[str, object]", raw_value).items():
                field_name = section_map.get(section_key)
                if field_name is None:
                    logger.warning(
                        "Ignoring unknown Columnist config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                values[field_name] = _coerce_file_value(
                    field_name=field_name,
                    raw_value=section_value,
                    source=f"{key}.{section_key}",
                )
            continue

        field_name = _TOP_LEVEL_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown Columnist config key '%s'.", key)
            continue
        values[field_name] = _coerce_file_value(
            field_name=field_name,
            raw_value=raw_value,
            source=key,
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def validate_layout_settings(
    *,
    column_width: int | None,
    separator_width: int,
    encoding: str,
) -> int:
    """Check layout settings and return the required column width."""

    if column_width is None:
        raise ValueError("Column width is required.")
    if column_width <= 0:
        raise ValueError("Column width must be greater than 0.")
    if separator_width < 0:
        raise ValueError("Separator width must be greater than or equal to 0.")
    if not encoding.strip():
        raise ValueError("Encoding must not be null or empty.")
    return column_width


def _build_config(values: dict[str, object]) -> ColumnistConfig:
    config = ColumnistConfig(
        column_width=cast("int | None", values["column_width"]),
        separator_width=cast("int", values["separator_width"]),
        encoding=cast("str", values["encoding"]),
        justify_last_line=cast("bool", values["justify_last_line"]),
    )
    if config.column_width is not None and config.column_width <= 0:
        raise ValueError("Invalid column_width: must be greater than 0.")
    if config.separator_width < 0:
        raise ValueError("Invalid separator_width: must be greater than or equal to 0.")
    return config


def load_config(project_root: Path) -> ColumnistConfig:
    """Load `.columnist/config.toml` and apply environment overrides."""

    values = _default_values()
    path = config_path(project_root)
    if path.is_file():
        payload_obj = tomllib.loads(path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        _apply_toml_payload(values=values, payload=payload, path=path)

    _apply_env_overrides(values)
    return _build_config(values)
