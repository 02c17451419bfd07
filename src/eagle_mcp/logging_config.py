"""Logging infrastructure for the EAGLE import MCP server.

Provides structured logging with configurable levels and batch tracking,
so every record emitted while converting one request can be correlated.
"""

from __future__ import annotations

import logging
import os
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# Batch ID tracking for conversion-level correlation
batch_id_ctx: ContextVar[str | None] = ContextVar("batch_id", default=None)


def get_batch_id() -> str | None:
    """Get the current conversion batch ID if available."""
    return batch_id_ctx.get()


@contextmanager
def conversion_batch(batch_id: str | None = None) -> Iterator[str]:
    """Tag all log records emitted inside the block with one batch ID."""
    batch_id = batch_id or uuid.uuid4().hex[:8]
    token = batch_id_ctx.set(batch_id)
    try:
        yield batch_id
    finally:
        batch_id_ctx.reset(token)


class _BatchIdFilter(logging.Filter):
    """Make sure ``%(batch_id)s`` always resolves in the formatter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "batch_id"):
            record.batch_id = get_batch_id() or "-"
        return True


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ERROR').
               Defaults to LOGGING_LEVEL env var or 'INFO'.
        format_string: Custom log format string. Defaults to a structured format.

    Returns:
        The root logger configured for the application.
    """
    if level is None:
        level = os.environ.get("LOGGING_LEVEL", "INFO")

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] [%(name)s] [batch=%(batch_id)s] %(message)s"

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    # MCP stdio transport owns stdout
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    console_handler.addFilter(_BatchIdFilter())
    logger.addHandler(console_handler)

    # Disable noisy third-party loggers
    logging.getLogger("asyncio").setLevel("WARNING")
    logging.getLogger("asyncio").propagate = False

    return logger


class BatchLoggerAdapter(logging.LoggerAdapter[Any]):
    """Logger adapter that automatically adds the batch ID to log records."""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        """Process the log record and add batch context."""
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        batch_id = get_batch_id()
        if batch_id is not None:
            extra["batch_id"] = batch_id
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger(name: str) -> BatchLoggerAdapter:
    """Get a logger for the given module name.

    Args:
        name: The module name (e.g., __name__).

    Returns:
        A configured logger with batch context support.
    """
    return BatchLoggerAdapter(logging.getLogger(name), {})


def create_logger(name: str) -> BatchLoggerAdapter:
    """Create and return a logger for a module (typically ``__name__``)."""
    return get_logger(name)
