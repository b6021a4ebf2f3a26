"""Logging configuration helpers with secret and identifier redaction."""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Iterable

REDACTED = "[redacted]"

# Header-style credentials: the label is kept, the value is replaced.
_CREDENTIAL_PATTERNS = (
    re.compile(r"(Bearer\s+)[A-Za-z0-9\-._~+/=]+", re.IGNORECASE),
    re.compile(r"(X-API-Key[=:]\s*)[^&\s]+", re.IGNORECASE),
)
# Runs of six or more digits, optionally punctuated the way masked ids are
# (123.456.789-01, 4111 1111 1111 1111). Short numbers such as status codes
# and durations are left alone.
_IDENTIFIER_PATTERN = re.compile(r"(?<![\w.])\d(?:[ .\-/]?\d){5,}(?![\w])")
# Record attributes that describe the call site rather than carry user data.
_SKIPPED_ATTRIBUTES = frozenset(
    {"msg", "name", "levelname", "pathname", "filename", "module", "funcName"}
)


def mask_identifiers(value: str) -> str:
    """Replace identifier-like digit runs with the redaction marker."""

    return _IDENTIFIER_PATTERN.sub(REDACTED, value)


class SensitiveDataFilter(logging.Filter):
    """Filter that redacts configured secrets and user identifiers from log records."""

    def __init__(self, secrets: Iterable[str]):
        super().__init__()
        self._secrets = [secret.strip() for secret in secrets if secret and secret.strip()]

    def sanitize(self, value: str) -> str:
        for pattern in _CREDENTIAL_PATTERNS:
            value = pattern.sub(r"\1" + REDACTED, value)
        for secret in self._secrets:
            value = value.replace(secret, REDACTED)
        return mask_identifiers(value)

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - standard interface
        message = record.getMessage()
        sanitized = self.sanitize(message)
        if sanitized != message:
            record.msg = sanitized
            record.args = ()

        for key, value in list(vars(record).items()):
            if key not in _SKIPPED_ATTRIBUTES and isinstance(value, str):
                setattr(record, key, self.sanitize(value))

        return True


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - override
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if request_id := getattr(record, "request_id", None):
            payload["request_id"] = request_id

        if format_id := getattr(record, "format_id", None):
            payload["format_id"] = format_id

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=True)


def configure_logging(level_name: str, fmt: str, secrets: Iterable[str]) -> None:
    """Configure root logging with optional JSON output and redaction."""

    numeric_level = getattr(logging, level_name.upper(), logging.INFO)
    handler = logging.StreamHandler()
    if (fmt or "plain").lower() == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    handler.setFormatter(formatter)

    filter_ = SensitiveDataFilter(secrets)
    handler.addFilter(filter_)

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(numeric_level)

    logging.captureWarnings(True)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.setLevel(numeric_level)
        logger.propagate = True
        logger.addFilter(filter_)
