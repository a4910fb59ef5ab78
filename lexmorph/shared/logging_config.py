# lexmorph/shared/logging_config.py
import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace

from lexmorph.shared.config import Settings, settings as default_settings


def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    This links the log to the distributed trace.
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


def _level_number(name: str) -> int:
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).
    """
    settings = settings or default_settings
    level = _level_number(settings.LOG_LEVEL)

    # 1. Define the chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    # Classification logs per call at debug level, so the level filter matters here.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Standard library logging carries the rendered lines to stderr
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
