"""Structured logging configuration using structlog."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _renderer(json_output: bool, stream: TextIO) -> structlog.types.Processor:
    if json_output or not stream.isatty():
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route objtasks' structlog events through stdlib logging on ``stream``.

    Logs default to stderr so that command output on stdout stays clean.
    Calling this again replaces the previous configuration.
    """
    stream = stream or sys.stderr
    level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[*SHARED_PROCESSORS, _renderer(json_output, stream)],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("objtasks")
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
