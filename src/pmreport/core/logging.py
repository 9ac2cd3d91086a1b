"""Structured logging with a per-run identifier."""

from __future__ import annotations

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog
from structlog.typing import FilteringBoundLogger, Processor

# Identifier shared by every log record of one pipeline run
_run_id_var: ContextVar[str | None] = ContextVar("run_id", default=None)

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def set_run_id(run_id: str | None = None) -> str:
    """Set the run ID for the current context.

    Args:
        run_id: Optional run ID. If not provided, generates a new UUID.

    Returns:
        The run ID that was set
    """
    if run_id is None:
        run_id = str(uuid.uuid4())
    _run_id_var.set(run_id)
    return run_id


def get_run_id() -> str | None:
    """Get the current run ID, or None outside of a run."""
    return _run_id_var.get()


def clear_run_id() -> None:
    _run_id_var.set(None)


def add_run_id(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Processor adding the run ID to log records."""
    run_id = get_run_id()
    if run_id is not None:
        event_dict["run_id"] = run_id
    return event_dict


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure application-wide logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ('json' or 'console')

    Raises:
        ValueError: If log_level is not a valid logging level
    """
    log_level_upper = log_level.upper()
    if log_level_upper not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log_level '{log_level}'. Must be one of: {', '.join(sorted(VALID_LEVELS))}"
        )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level_upper),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_run_id,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level_upper)),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
