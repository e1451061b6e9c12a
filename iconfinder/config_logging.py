"""Logging configuration"""

import logging
import sys
from logging.config import dictConfig
from typing import Any, Optional, TextIO

from dockerflow.logging import JsonLogFormatter
from rich.console import Console
from rich.logging import RichHandler

from iconfinder.config import settings

# Loggers written at the configured level.
APPLICATION_LOGGERS: tuple[str, ...] = ("iconfinder", "request.summary")

# The HTTP client logs every upstream request at INFO and each icon lookup makes
# several, so only its warnings are kept.
UPSTREAM_CLIENT_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")

# Cloud Logging severities, see `LogSeverity` in the Cloud Logging API.
CLOUD_LOGGING_SEVERITY: dict[str, int] = {
    "DEBUG": 100,
    "INFO": 200,
    "WARNING": 400,
    "ERROR": 500,
    "CRITICAL": 600,
}


class GCPCompatibleJSONFormatter(JsonLogFormatter):
    """MozLog JSON formatter that also writes the lowercase `severity` Cloud Logging reads."""

    def convert_record(self, record: logging.LogRecord) -> dict[str, Any]:
        out = super().convert_record(record)
        out["severity"] = CLOUD_LOGGING_SEVERITY.get(record.levelname, 0)
        return out


def _pretty_handler(stream: TextIO) -> RichHandler:
    return RichHandler(console=Console(file=stream))


def _console_handler(log_format: str, stream: TextIO) -> dict[str, Any]:
    match log_format:
        case "mozlog":
            return {"class": "logging.StreamHandler", "formatter": "json", "stream": stream}
        case "pretty":
            return {"()": _pretty_handler, "formatter": "text", "stream": stream}
        case _:
            raise ValueError(
                f"Invalid log format: {log_format}. Should either be 'mozlog' or 'pretty'."
            )


def configure_logging(stream: Optional[TextIO] = None) -> None:
    """Send application logs to a single console handler in the configured format.

    Records go to stdout unless `stream` is given. The CLI passes stderr so that its
    JSON output can be piped.
    """
    log_format = settings.logging.format
    console = _console_handler(log_format, stream or sys.stdout)

    if settings.current_env.lower() == "production" and log_format != "mozlog":
        raise ValueError("Log format must be 'mozlog' in production")

    level = settings.logging.level
    loggers: dict[str, dict[str, Any]] = {
        name: {
            "handlers": ["console"],
            "level": level,
            "propagate": settings.logging.can_propagate,
        }
        for name in APPLICATION_LOGGERS
    }
    for name in UPSTREAM_CLIENT_LOGGERS:
        loggers[name] = {"handlers": ["console"], "level": "WARNING", "propagate": False}
    loggers["uvicorn.error"] = {"handlers": ["console"], "level": "ERROR", "propagate": False}

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": "%(message)s"},
                "json": {"()": GCPCompatibleJSONFormatter, "logger_name": "iconfinder"},
            },
            "handlers": {"console": {"level": level, **console}},
            "loggers": loggers,
        }
    )
