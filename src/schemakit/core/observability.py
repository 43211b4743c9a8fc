#!/usr/bin/env python3
"""
Purpose:
    Structured logging setup for SchemaKit (structlog over stdlib logging).
"""
from __future__ import annotations

import logging
from typing import Any

import structlog


def configure_logging(level: str = "INFO", *, json_format: bool = False) -> None:
    """
    Configure structlog processors and the stdlib handler level.

    Args:
        level: Stdlib level name (DEBUG, INFO, WARNING, ...).
        json_format: Render JSON lines instead of the console renderer.

    Raises:
        ValueError: if `level` is not a known logging level name.
    """
    numeric_level = getattr(logging, str(level).upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    processors: list[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", level=numeric_level)
    logging.getLogger("schemakit").setLevel(numeric_level)
