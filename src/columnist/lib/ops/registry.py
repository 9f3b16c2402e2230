"""Operation registry shared by the CLI and MCP surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


@dataclass(frozen=True, slots=True)
class OperationSpec(Generic[InputT, OutputT]):
    """Single source of truth for an operation exposed on both surfaces."""

    name: str
    handler: Callable[[InputT], Coroutine[Any, Any, OutputT]]
    sync_handler: Callable[[InputT], OutputT]
    input_type: type[InputT]
    output_type: type[OutputT]
    cli_group: str
    cli_name: str
    mcp_name: str
    description: str
    cli_only: bool = False
    mcp_only: bool = False


_REGISTRY: dict[str, OperationSpec[Any, Any]] = {}
_bootstrapped = False


def operation(spec: OperationSpec[InputT, OutputT]) -> OperationSpec[InputT, OutputT]:
    """Register an operation and guard against duplicates."""

    if spec.cli_only and spec.mcp_only:
        raise ValueError(f"Operation '{spec.name}' cannot be both cli_only and mcp_only")
    if spec.name in _REGISTRY:
        raise ValueError(
            f"Duplicate operation name '{spec.name}': already registered by "
            f"{_REGISTRY[spec.name].handler}"
        )
    _REGISTRY[spec.name] = spec
    return spec


def get_all_operations() -> list[OperationSpec[Any, Any]]:
    """Return all registered operations sorted by canonical name."""

    _ensure_bootstrapped()
    return [_REGISTRY[name] for name in sorted(_REGISTRY)]


def get_operation(name: str) -> OperationSpec[Any, Any]:
    """Fetch one operation spec by canonical name."""

    _ensure_bootstrapped()
    return _REGISTRY[name]


def _bootstrap_operation_modules() -> None:
    # Operation modules self-register via `operation(...)` on import.
    import columnist.lib.ops.config as config_ops
    import columnist.lib.ops.layout as layout_ops

    _ = (config_ops, layout_ops)


def _ensure_bootstrapped() -> None:
    global _bootstrapped
    if _bootstrapped:
        return
    # Only mark bootstrapped after a successful import sequence so failures retry.
    _bootstrap_operation_modules()
    _bootstrapped = True
