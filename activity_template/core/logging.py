"""
Logging setup for activity-template.

The service layer logs through structlog; output always goes to stderr so that
artifacts printed by the CLI on stdout can be piped unchanged. Interactive
terminals get colored key=value lines, anything else gets one JSON object per
event.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config import Config


def setup_logging(config: Config | None = None) -> None:
    """Install the stderr logging pipeline at the configured level (INFO without a config)."""
    log_level = config.log_level if config else "INFO"
    level = getattr(logging, log_level, logging.INFO)

    console = Console(stderr=True)
    handler = RichHandler(
        console=console,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=log_level == "DEBUG",
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if sys.stderr.isatty():
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Rebuilt per call so a later setup_logging() takes effect
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a module, normally called with ``__name__``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Attach fields such as the activity name to every event until cleared."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop fields attached by bind_context."""
    structlog.contextvars.clear_contextvars()
