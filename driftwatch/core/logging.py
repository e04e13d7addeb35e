"""
Structured logging configuration for the drift detection engine.

This module provides a centralized setup for structured logging using
`structlog`. Log entries are rendered as JSON (or human-readable console
output during development) and enriched with the name of the monitored signal
bound in the current context, so that logs from several engines running in
one process can be told apart.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional

import structlog

from driftwatch import __version__
from driftwatch.core.config import Settings, get_settings

# Name of the signal (feature, metric, or model output) being monitored in
# the current context.
signal_var: ContextVar[Optional[str]] = ContextVar("signal", default=None)

_service_name = "driftwatch"


def setup_structured_logging(settings: Optional[Settings] = None) -> None:
    """Configures structured logging for the engine.

    Sets up `structlog` with a chain of processors that add timestamps, log
    levels, and the monitored signal to every entry. The final renderer is
    chosen from `settings.monitoring.log_format`.

    Args:
        settings: Settings to configure from. Defaults to the process settings.
    """
    global _service_name
    settings = settings or get_settings()
    _service_name = settings.monitoring.service_name

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.monitoring.log_level.upper(), logging.INFO),
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.monitoring.log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    shared_processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _add_engine_context,
        renderer,
    ]

    structlog.configure(
        processors=shared_processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_engine_context(
    logger: logging.Logger, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Adds service and signal context to log entries.

    Args:
        logger: The standard library logger instance.
        method_name: The name of the logging method (e.g., 'info', 'error').
        event_dict: The dictionary representing the log entry to be enriched.

    Returns:
        The enriched log entry dictionary.
    """
    event_dict.setdefault("service", _service_name)
    event_dict.setdefault("version", __version__)
    event_dict.setdefault("component", getattr(logger, "name", "unknown"))

    signal = signal_var.get()
    if signal:
        event_dict.setdefault("signal", signal)

    if method_name in ("error", "exception", "critical"):
        event_dict.setdefault("error_type", "engine_error")
        if "exc_info" in event_dict and method_name == "exception":
            event_dict["error_type"] = "exception"

    return event_dict


def log_drift_check(
    logger,
    outcome: str,
    duration_ms: float,
    is_drift: Optional[bool] = None,
    severity: Optional[str] = None,
    average_score: Optional[float] = None,
) -> None:
    """Logs a standardized message for a completed drift check.

    Args:
        logger: The `structlog` logger instance to use.
        outcome: How the check was answered ('computed', 'skipped', 'cached').
        duration_ms: The duration of the check in milliseconds.
        is_drift: Whether drift was reported, when known.
        severity: The reported severity, when known.
        average_score: The aggregate drift score, when known.
    """
    log_data: Dict[str, Any] = {
        "outcome": outcome,
        "duration_ms": round(duration_ms, 3),
        "operation_type": "drift_check",
    }
    if is_drift is not None:
        log_data["is_drift"] = is_drift
    if severity is not None:
        log_data["severity"] = severity
    if average_score is not None:
        log_data["average_score"] = average_score

    if is_drift:
        logger.warning("Drift detected", **log_data)
    else:
        logger.debug("Drift check completed", **log_data)


def bind_signal(signal: str) -> None:
    """Sets the monitored signal name for the current context.

    Args:
        signal: The name of the monitored feature, metric, or model output.
    """
    signal_var.set(signal)


def get_signal() -> Optional[str]:
    """Retrieves the monitored signal name from the current context.

    Returns:
        The current signal name, or `None` if it has not been set.
    """
    return signal_var.get()


def clear_signal() -> None:
    """Clears the monitored signal name from the current context."""
    signal_var.set(None)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Retrieves a `structlog` logger instance.

    Args:
        name: The name of the logger, typically the module's `__name__`.

    Returns:
        A configured `structlog` logger instance.
    """
    return structlog.get_logger(name)


def get_contextual_logger(name: str, **extra_context) -> structlog.stdlib.BoundLogger:
    """Retrieves a logger with additional, permanently bound context.

    Args:
        name: The name of the logger, typically the module's `__name__`.
        **extra_context: Keyword arguments to be bound to the logger's context.

    Returns:
        A `structlog` logger with the specified context permanently bound to it.
    """
    logger = structlog.get_logger(name)

    signal = get_signal()
    if signal:
        extra_context.setdefault("signal", signal)

    return logger.bind(**extra_context) if extra_context else logger
