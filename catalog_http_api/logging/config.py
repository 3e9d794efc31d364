# catalog_http_api/logging/config.py

"""
Logging configuration for the Translation Catalog HTTP API.

Configures structlog and the standard logging library to emit structured
JSON logs (production) or colored text logs (development). Intended to be
called once at process startup, typically from ``catalog_http_api.main``
or the admin CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog
from opentelemetry import trace

from catalog_http_api.config import LogFormat, Settings, get_config

from . import DEFAULT_LOGGER_NAME, get_logger


def add_open_telemetry_spans(
    _: Any, __: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant,
    falling back to INFO when the value is empty or unrecognized.
    """
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    settings: Optional[Settings] = None,
    *,
    service_name: str = DEFAULT_LOGGER_NAME,
) -> structlog.stdlib.BoundLogger:
    """
    Initialize logging for the service and return a service logger.
    """
    settings = settings or get_config()
    level = _parse_level(settings.log_level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route stdlib logging (uvicorn, sqlalchemy) to the same stream.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    return get_logger(service_name)


__all__ = ["add_open_telemetry_spans", "configure_logging"]
