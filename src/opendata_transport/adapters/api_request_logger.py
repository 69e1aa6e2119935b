"""Utility for logging API requests when TRANSPORT_API_LOG_REQUESTS is enabled."""

import json
import logging
import os

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV_VAR = "TRANSPORT_API_LOG_REQUESTS"


def should_log_requests() -> bool:
    """Check if request logging is enabled via TRANSPORT_API_LOG_REQUESTS environment variable."""
    return os.getenv(LOG_REQUESTS_ENV_VAR, "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if TRANSPORT_API_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Full request URL including the encoded query string.
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
