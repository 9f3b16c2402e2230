"""Structlog configuration helpers."""

from __future__ import annotations

import logging as std_logging
import sys

import structlog

_LEVELS: tuple[int, ...] = (std_logging.WARNING, std_logging.INFO, std_logging.DEBUG)


def level_from_verbosity(verbosity: int) -> int:
    """Map a `-v` count to a log level: none -> WARNING, one -> INFO, more -> DEBUG."""

    return _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Configure structlog and stdlib logging for the CLI or the MCP server."""

    level = level_from_verbosity(verbosity)
    # Layout rows go to stdout; every log line goes to stderr.
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(std_logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    std_logging.basicConfig(level=level, handlers=[handler])

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if json_mode
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
