"""
bucketkeeper logging.

All loggers hang off the "bucketkeeper" logger; HTTP traffic goes to
"bucketkeeper.http" at DEBUG level. Access tokens never reach a log record.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

_root_logger = logging.getLogger("bucketkeeper")
_http_logger = logging.getLogger("bucketkeeper.http")

REDACTED = "[REDACTED]"

_SENSITIVE_PATTERNS = [
    # "token abc..." as sent in the Authorization header
    (re.compile(r"(token|bearer|basic)\s+[A-Za-z0-9_\-\.=:+/]{8,}", re.IGNORECASE), rf"\1 {REDACTED}"),
    # user:password@ in clone and API URLs
    (re.compile(r"(https?://)[^/\s:@]+:[^/\s@]+@"), rf"\1{REDACTED}@"),
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), rf"\1: {REDACTED}"),
]

_SENSITIVE_FIELDS = ("authorization", "token", "password", "secret", "api_key")


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> None:
    """
    Attach a handler to the bucketkeeper loggers.

    Example:
        ```python
        import logging
        from bucketkeeper.logging import configure_logging

        # show every request made to GitBucket
        configure_logging(http_level=logging.DEBUG)
        ```
    """
    handler = handler or logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string))

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)
    _http_logger.setLevel(level if http_level is None else http_level)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or the child logger "bucketkeeper.<name>"."""
    if name is None:
        return _root_logger
    return logging.getLogger(f"bucketkeeper.{name}")


def mask_sensitive_data(text: str) -> str:
    """Replace tokens and URL credentials in text with a redaction marker."""
    for pattern, replacement in _SENSITIVE_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def redact_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a header or payload mapping, redacting values of credential fields."""
    return {
        key: REDACTED if any(field in key.lower() for field in _SENSITIVE_FIELDS) else value
        for key, value in data.items()
    }


def log_http_request(
    method: str,
    url: str,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
) -> None:
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    message = f"{method} {mask_sensitive_data(url)}"
    if headers:
        message += f" | headers={redact_fields(headers)}"
    if body:
        message += f" | body={redact_fields(body) if isinstance(body, Mapping) else body}"

    _http_logger.debug(message)


def log_http_response(status_code: int, url: str, elapsed_ms: float | None = None) -> None:
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    message = f"Response {status_code} from {mask_sensitive_data(url)}"
    if elapsed_ms is not None:
        message += f" | elapsed={elapsed_ms:.2f}ms"

    _http_logger.debug(message)


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "redact_fields",
    "log_http_request",
    "log_http_response",
]
