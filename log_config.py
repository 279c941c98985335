"""Structured JSON logging shared by the webhook, the worker and every backend."""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "voice-note-transcriber"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"

# Uvicorn loggers stop propagating and write through the service handler instead.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def _log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


def build_handler() -> logging.Handler:
    """Creates a stdout handler emitting one JSON object per record, tagged with the service name."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(LOG_FORMAT, static_fields={"service": SERVICE_NAME})
    )
    return handler


def setup_logging():
    """
    Configures structured JSON logging for the service.

    Every record carries timestamp, level, logger name, message, the ddtrace
    trace_id and span_id, and a static "service" field so webhook access
    logs and voice-note job logs can be filtered together. The level comes
    from LOG_LEVEL (default INFO).

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = _log_level()
    handler = build_handler()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for logger_name in UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [handler]
        u_logger.propagate = False

    return root_logger
