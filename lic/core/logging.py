"""Structured logging for the lic CLI: structlog rendered through stdlib logging."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog

# Third-party loggers that are never more verbose than WARNING.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(level: str | None = None, *, stream: TextIO | None = None) -> None:
    """Route every ``lic.*`` logger to *stream* (stderr by default).

    Environment:
        LIC_LOG_LEVEL   default WARNING; an explicit *level* overrides it
        LIC_LOG_FORMAT  ``console`` (default) or ``json``

    The report owns stdout, so logs never go there. Unknown level names
    fall back to WARNING.
    """
    log_level = _resolve_level(level or os.environ.get("LIC_LOG_LEVEL", "WARNING"))
    as_json = os.environ.get("LIC_LOG_FORMAT", "console").lower() == "json"

    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)
    logging.getLogger("lic").setLevel(log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
