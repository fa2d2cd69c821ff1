"""Logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def _processors(colors: bool) -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=colors),
    ]


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> None:
    """Configure structlog with console output.

    The session screen owns the terminal, so only warnings and errors are shown
    unless ``verbose`` is set, which enables per-keystroke DEBUG events.

    Args:
        verbose: If True, show DEBUG level logs. Otherwise, show WARNING and above.
        stream: Destination for log lines. Defaults to stderr.
    """
    stream = stream or sys.stderr
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(format="%(message)s", stream=stream, level=level, force=True)

    structlog.configure(
        processors=_processors(colors=stream.isatty()),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a logger instance for the given name."""
    return structlog.get_logger(name)
