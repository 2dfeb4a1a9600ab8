"""
Structured logging -- structlog over stdlib logging.

Console rendering for local runs, JSON for log aggregation. Level and
renderer default to configs.settings so scripts only call setup_logging().
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog


def setup_logging(*, level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Call once at process startup. Configures both stdlib logging
    and structlog in one shot. Unset arguments fall back to settings.
    """
    if level is None or json_output is None:
        from configs.settings import get_settings

        cfg = get_settings()
        level = cfg.log_level if level is None else level
        json_output = cfg.log_json if json_output is None else json_output

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Named structlog logger. Safe to call before setup_logging()."""
    return structlog.get_logger(name)
