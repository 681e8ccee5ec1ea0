"""Logging configuration for the Sapiens.io backend.

Everything is written to stdout as one JSON object per line, including the
uvicorn server and access logs, so the hosting platform can index them.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "sapiens"

# Server loggers re-routed through the same JSON handler
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    """Formats records as JSON tagged with the service that emitted them."""

    def __init__(self, service: str, environment: str):
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "environment": self.environment,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Structured context passed as extra={"extra_data": {...}}
        extra_data: Optional[Dict[str, Any]] = getattr(record, "extra_data", None)
        if extra_data:
            log_data.update(extra_data)

        return json.dumps(log_data, default=str)


def configure_logging(
    debug: bool = False,
    service: str = "Sapiens.io",
    environment: str = "development",
) -> logging.Logger:
    """
    Install the JSON stdout handler on the application and server loggers.

    Args:
        debug: Log at DEBUG instead of INFO.
        service: Service name stamped on every line.
        environment: Deployment label stamped on every line.

    Returns:
        The application root logger.
    """
    log_level = logging.DEBUG if debug else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter(service, environment))

    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for name in (ROOT_LOGGER_NAME, *SERVER_LOGGERS):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(log_level)
        logger.propagate = False

    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``sapiens.app.crud.user``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
