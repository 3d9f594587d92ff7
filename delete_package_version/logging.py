"""
Logging utilities.

Provides the package loggers, a formatter that renders records as GitHub
Actions workflow commands, and helpers that keep tokens out of the log.
"""

import logging
import re
import sys
from typing import Any, TextIO

_root_logger = logging.getLogger("delete_package_version")
_http_logger = logging.getLogger("delete_package_version.http")

# Handler added by configure_logging, replaced on reconfiguration
_installed_handler: logging.Handler | None = None

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization headers
    (re.compile(r"\bBearer\s+[A-Za-z0-9_\-\.]+"), "Bearer [REDACTED]"),
    # GitHub token formats (classic, fine-grained, app installation)
    (re.compile(r"\b(ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b"), "[TOKEN_REDACTED]"),
    (re.compile(r"\bgithub_pat_[A-Za-z0-9_]{20,}\b"), "[TOKEN_REDACTED]"),
    # Secret/token assignments
    (re.compile(r"(secret|token|password|authorization)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {"authorization", "token", "secret", "password"}

# Workflow command prefix per log level; INFO is written as plain text
_COMMAND_PREFIXES = {
    logging.DEBUG: "::debug::",
    logging.WARNING: "::warning::",
    logging.ERROR: "::error::",
    logging.CRITICAL: "::error::",
}


class WorkflowCommandFormatter(logging.Formatter):
    """
    Render log records the way the GitHub Actions runner expects.

    Errors and warnings become ``::error::`` / ``::warning::`` annotations,
    debug records are only shown when step debugging is enabled, and info
    records are printed as-is.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = _COMMAND_PREFIXES.get(record.levelno, "")
        if not prefix:
            return message
        # Workflow commands are single-line; escape the rest
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"{prefix}{escaped}"


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure package logging.

    Args:
        level: Default log level for all package loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stdout)
        format_string: Custom format string (default: message only)

    Example:
        ```python
        import logging
        from delete_package_version.logging import configure_logging

        # Show HTTP requests as ::debug:: lines
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(WorkflowCommandFormatter(format_string))

    global _installed_handler
    if _installed_handler is not None:
        _root_logger.removeHandler(_installed_handler)
    _installed_handler = handler

    _root_logger.setLevel(level)
    _root_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a package logger.

    Args:
        name: Logger name suffix (e.g., "http", "workflow"). If None, returns
            the package's root logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _root_logger
    return logging.getLogger(f"delete_package_version.{name}")


def mask_secret(value: str, stream: TextIO | None = None) -> None:
    """
    Register a value with the runner so it is redacted from all step output.

    Args:
        value: Secret value (e.g. the registry token)
        stream: Stream to write the command to (default: stdout)
    """
    if not value:
        return
    out = stream if stream is not None else sys.stdout
    out.write(f"::add-mask::{value}\n")
    out.flush()


def mask_sensitive_data(text: str) -> str:
    """
    Mask tokens and authorization values in a string.

    Args:
        text: Text that may contain sensitive data

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, token, secret, password)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> None:
    """
    Log an HTTP request at DEBUG level with sensitive data masked.

    Args:
        method: HTTP method (GET, DELETE, ...)
        url: Request URL
        headers: Request headers (optional)
        params: Query parameters (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    if params:
        log_parts.append(f"params={params}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
    request_id: str | None = None,
) -> None:
    """
    Log an HTTP response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        elapsed_ms: Request duration in milliseconds (optional)
        request_id: Registry request identifier (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if request_id:
        log_parts.append(f"request_id={request_id}")

    _http_logger.debug(" | ".join(log_parts))


__all__ = [
    "WorkflowCommandFormatter",
    "configure_logging",
    "get_logger",
    "mask_secret",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
]
