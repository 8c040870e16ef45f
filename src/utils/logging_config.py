"""Logging setup for the slash command service."""

import os
import logging
import sys
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "surubot"


class LoggingConfig:
    """Logging settings, read from the environment at import time."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "json").lower()
    LOG_MESSAGE_CONTENT = os.environ.get("LOG_MESSAGE_CONTENT", "true").lower() == "true"
    LOG_MASK_SENSITIVE = os.environ.get("LOG_MASK_SENSITIVE", "true").lower() == "true"
    LOG_SLOW_OPERATION_THRESHOLD_MS = int(os.environ.get("LOG_SLOW_OPERATION_THRESHOLD_MS", "1000"))

    # Client libraries that log every Web API call at INFO
    QUIET_LOGGERS = ("slack_sdk", "urllib3")

    @classmethod
    def build_formatter(cls) -> logging.Formatter:
        """JSON lines tagged with the service name, or a readable text format."""
        if cls.LOG_FORMAT == "json":
            return jsonlogger.JsonFormatter(
                "%(levelname)s %(name)s %(message)s",
                rename_fields={"levelname": "level"},
                static_fields={"service": SERVICE_NAME},
                timestamp=True,
            )
        return logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(correlation_id)s %(message)s",
            defaults={"correlation_id": "-"},
        )

    @classmethod
    def setup_logging(cls) -> None:
        """Send all records to stdout (collected by Vercel) with the configured format."""
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(cls.build_formatter())

        root_logger = logging.getLogger()
        root_logger.handlers[:] = [handler]
        root_logger.setLevel(getattr(logging, cls.LOG_LEVEL, logging.INFO))

        for name in cls.QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
