"""Structured logging for REST requests and pagination.

Each helper emits one event-named log record with its fields in `extra`,
so handlers can render them as JSON or key/value pairs.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_completed(
    *,
    method: str,
    url: str,
    status: int,
    latency_ms: float,
    body_bytes: int,
) -> None:
    """Log a completed HTTP request.

    Args:
        method: HTTP verb
        url: Requested URL
        status: Response status code
        latency_ms: Time until the body was read, in milliseconds
        body_bytes: Size of the response body
    """
    logger.debug(
        "request_completed",
        extra={
            "method": method,
            "url": url,
            "status": status,
            "latency_ms": latency_ms,
            "body_bytes": body_bytes,
        },
    )


def log_request_failed(
    *,
    method: str,
    url: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log an HTTP request that failed at the transport level."""
    logger.warning(
        "request_failed",
        extra={
            "method": method,
            "url": url,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_page_fetched(
    *,
    direction: str,
    url: str,
    items: int,
    has_next: bool,
    has_prev: bool,
) -> None:
    """Log a page fetched by following a `Link` relation."""
    logger.debug(
        "page_fetched",
        extra={
            "direction": direction,
            "url": url,
            "items": items,
            "has_next": has_next,
            "has_prev": has_prev,
        },
    )
