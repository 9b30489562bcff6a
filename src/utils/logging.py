"""Structured JSON logging configuration."""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Dict, Any

REDACTED = "***REDACTED***"

# Keys in ``extra`` whose values are never written out
SENSITIVE_KEYS = {"password", "password_hash", "token", "authorization", "secret", "jwt_secret"}

SENSITIVE_PATTERNS = [
    (re.compile(r"(bearer\s+)([A-Za-z0-9_\-\.]{10,})", re.IGNORECASE), r"\1" + REDACTED),
    (re.compile(r"(password\s*[:=]\s*['\"]?)([^'\"\s,}]+)", re.IGNORECASE), r"\1" + REDACTED),
    (re.compile(r"\$2[aby]?\$\d{2}\$[./A-Za-z0-9]{53}"), REDACTED),
    (re.compile(r"eyJ[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+\.[A-Za-z0-9_\-]+"), REDACTED),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


class RedactingFilter(logging.Filter):
    """Mask credentials, tokens and password hashes before records are emitted."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = sanitize_message(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(
                sanitize_message(a) if isinstance(a, str) else a for a in record.args
            )
        for key in SENSITIVE_KEYS:
            if key in record.__dict__:
                setattr(record, key, REDACTED)
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    # Standard LogRecord attributes that should not be included as extra fields
    _STANDARD_ATTRS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
        'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname',
        'process', 'processName', 'relativeCreated', 'thread', 'threadName',
        'exc_info', 'exc_text', 'stack_info', 'taskName'
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # logger.info("message", extra={"userId": 1}) puts userId on the record
        for key, value in record.__dict__.items():
            if key not in self._STANDARD_ATTRS and not callable(value):
                log_data[key] = value

        return json.dumps(log_data, default=str)


def setup_structured_logging(level: int = logging.INFO):
    """Configure structured JSON logging for the application.

    Also routes uvicorn's loggers through the same handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RedactingFilter())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    # Request logging middleware covers access logs
    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.setLevel(logging.WARNING)
