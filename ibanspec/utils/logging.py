"""
Structured logging configuration using structlog.

- Console output for interactive use, JSON for log aggregation
- Account numbers are masked before they reach any renderer
"""

import logging
import re
import sys
import time
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor

# Country code + check digits, at least 4 body chars, last 4 chars kept visible
_IBAN_LIKE = re.compile(r"\b([A-Z]{2}\d{2})([0-9A-Z]{4,})([0-9A-Z]{4})\b")


def _mask(text: str) -> str:
    def _replace(m: re.Match[str]) -> str:
        return m.group(1) + "*" * len(m.group(2)) + m.group(3)

    return _IBAN_LIKE.sub(_replace, text)


def mask_account_numbers(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Mask IBAN-like values in every string field of the event.

    ``GB82WEST12345698765432`` is logged as ``GB82**************5432``.
    """
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _mask(value)
    return event_dict


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to every log entry."""
    from ibanspec import __version__

    event_dict["app"] = "ibanspec"
    event_dict["version"] = __version__
    return event_dict


def configure_logging(
    log_level: str = "WARNING",
    json_logs: bool = False,
    dev_mode: bool = True,
    cache_loggers: bool = True,
) -> None:
    """
    Configure structured logging.

    Called by the CLI. Importing ibanspec never configures logging, so a host
    application keeps its own structlog and root logger setup.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Whether to output JSON logs (recommended for production)
        dev_mode: Whether to use development-friendly output
        cache_loggers: Cache bound loggers on first use (disable in tests)
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        mask_account_numbers,
    ]

    if json_logs:
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    elif dev_mode:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache_loggers,
    )

    level = getattr(logging, log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    # basicConfig is a no-op once handlers exist; reconfiguration still has to move the level
    logging.getLogger().setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.debug("structure_compiled", structure="4!a6!n8!n")
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


class LogPerformance:
    """
    Context manager for logging performance metrics.

    Usage:
        with LogPerformance("batch_validation", logger):
            ...
    """

    def __init__(self, operation: str, logger: structlog.stdlib.BoundLogger):
        self.operation = operation
        self.logger = logger
        self.start_time: float = 0

    def __enter__(self) -> "LogPerformance":
        self.start_time = time.perf_counter()
        self.logger.debug(f"{self.operation}_started")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration = time.perf_counter() - self.start_time

        if exc_type is None:
            self.logger.info(
                f"{self.operation}_completed",
                duration_ms=round(duration * 1000, 2),
                operation=self.operation,
            )
        else:
            self.logger.error(
                f"{self.operation}_failed",
                duration_ms=round(duration * 1000, 2),
                operation=self.operation,
                error=str(exc_val),
                error_type=exc_type.__name__,
            )

