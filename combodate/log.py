"""Structured logging configuration using structlog."""

import sys
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger


LEVELS = {"debug": 10, "info": 20, "warning": 30, "warn": 30, "error": 40, "critical": 50}


def setup_logging(level: str = "warning") -> None:
    """Configure structlog for Combodate.

    Log output goes to stderr so that stdout carries only the table.
    """
    log_level = LEVELS.get(level.lower(), 30)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """Get a structlog logger, optionally bound to a component name.

    The logger stays a lazy proxy so module-level loggers pick up
    whatever setup_logging() configures later.
    """
    if name:
        return structlog.get_logger(component=name)
    return structlog.get_logger()
