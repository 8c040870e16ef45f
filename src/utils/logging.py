"""Request-scoped structured logging for slash command handling."""

import hashlib
import logging
import re
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Optional

from src.models.slash_command import InboundCommand
from src.utils.logging_config import LoggingConfig, get_logger


_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

_SLACK_TOKEN_RE = re.compile(r"xox[abeprs]-[A-Za-z0-9-]+", re.IGNORECASE)


def get_correlation_id() -> Optional[str]:
    """Request id of the slash command being handled, if any."""
    return _correlation_id.get()


@contextmanager
def correlation_context(correlation_id: Optional[str] = None):
    """Tag every log line emitted inside the block with one request id."""
    token = _correlation_id.set(correlation_id or f"slash_{uuid.uuid4().hex[:12]}")
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)


def redact_slack_tokens(text: str) -> str:
    return _SLACK_TOKEN_RE.sub("[REDACTED_SLACK_TOKEN]", text)


def mask_user_id(user_id: Optional[str]) -> Optional[str]:
    """
    Replace a Slack user ID with its type prefix and a short hash.

    U0123ABCD -> U3f1c9a2b. Stable per user, so log lines can still be
    correlated without exposing the raw ID.
    """
    if not user_id or not LoggingConfig.LOG_MASK_SENSITIVE:
        return user_id
    digest = hashlib.sha256(user_id.encode("utf-8")).hexdigest()[:8]
    return f"{user_id[0]}{digest}"


def loggable_text(text: str, max_length: int = 200) -> Optional[str]:
    """Question text as it may appear in logs, or None when content logging is off."""
    if not text or not LoggingConfig.LOG_MESSAGE_CONTENT:
        return None
    if len(text) > max_length:
        text = text[:max_length] + "..."
    if LoggingConfig.LOG_MASK_SENSITIVE:
        text = redact_slack_tokens(text)
    return text


def command_fields(command: InboundCommand) -> dict[str, Any]:
    """Log fields describing one slash command invocation."""
    fields = {
        "command": command.name,
        "channel_id": command.channel_id,
        "team_id": command.team_id,
        "user_id": mask_user_id(command.user_id),
        "text": loggable_text(command.text),
    }
    return {key: value for key, value in fields.items() if value is not None}


class StructuredLogger:
    """Logger that attaches bound fields and the correlation id as record extras."""

    def __init__(self, logger: logging.Logger, **bound: Any):
        self.logger = logger
        self.bound = bound

    def bind(self, **fields: Any) -> "StructuredLogger":
        """Copy of this logger with extra fields on every line."""
        return StructuredLogger(self.logger, **{**self.bound, **fields})

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        extra = {**self.bound, **fields}
        correlation_id = get_correlation_id()
        if correlation_id:
            extra["correlation_id"] = correlation_id
        self.logger.log(level, message, extra=extra)

    def debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, fields)

    def warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._log(logging.ERROR, message, fields)


def get_structured_logger(name: str) -> StructuredLogger:
    return StructuredLogger(get_logger(name))


@contextmanager
def log_timing(operation: str, logger: StructuredLogger, **fields: Any):
    """
    Log how long the block took.

    One line per operation: INFO normally, WARNING with slow=True once the
    LOG_SLOW_OPERATION_THRESHOLD_MS budget is exceeded.
    """
    started = time.time()
    try:
        yield
    finally:
        elapsed_ms = round((time.time() - started) * 1000, 2)
        slow = elapsed_ms > LoggingConfig.LOG_SLOW_OPERATION_THRESHOLD_MS
        emit = logger.warning if slow else logger.info
        emit(
            f"Completed {operation}",
            operation=operation,
            processing_time_ms=elapsed_ms,
            slow=slow,
            **fields
        )
