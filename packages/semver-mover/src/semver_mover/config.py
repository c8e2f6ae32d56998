# SPDX-License-Identifier: MIT
"""Logging configuration for tools built on semver_mover.

The library itself never configures logging or reads the environment; it only
emits debug events through structlog. Front ends such as the ``mover`` CLI call
configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

import structlog
from structlog.typing import Processor


@dataclass
class MoverConfig:
    """Runtime options for front ends.

    Attributes:
        debug: Emit the library's debug events
        json_logs: Render log lines as JSON instead of console text
    """

    debug: bool = False
    json_logs: bool = False

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.debug else logging.WARNING


def configure_logging(config: MoverConfig) -> None:
    """Configure structlog for the given options. Log lines go to stderr."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if config.json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(config.log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
