"""Access logging for the HTTP API."""

import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger("employee_api.access")

# Polled by orchestrators; not worth a line each
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status_code: int) -> int:
    """Log level for a response status: server errors ERROR, client errors WARNING."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log ``METHOD path -> status (ms)`` once the response is ready.

    Registered with ``app.middleware("http")``.
    """
    started = time.perf_counter()
    response = await call_next(request)

    path = request.url.path
    if path not in QUIET_PATHS:
        logger.log(
            level_for_status(response.status_code),
            "%s %s -> %d (%.1f ms)",
            request.method,
            path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
    return response
