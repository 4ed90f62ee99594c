"""
structlog setup for edsign entry points.

Library modules only call structlog.get_logger(); configuring output is left
to whoever owns the process (the CLI, or the embedding application).
"""
from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import Processor


def configure_structlog(level: str = "WARNING", fmt: str = "console") -> None:
    """Configure structlog once at startup.

    fmt "json" renders one JSON object per line, anything else renders for a
    terminal. Logs go to stderr so command output on stdout stays clean.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if fmt == "json":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
