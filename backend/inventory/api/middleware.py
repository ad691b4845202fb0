"""Request Logging — one structured log line per handled request.

Invariants:
    - Logs method, path, status, duration and client IP
    - Health probes are not logged
    - A request whose handler raises is still logged, with status 500
    - Client IP: first global address in X-Forwarded-For, else the socket peer,
      else "localhost"
"""

import ipaddress
import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

SKIP_PREFIXES = ("/api/v1/health",)


def client_ip(request: Request) -> str:
    """Best-effort originating address of a request."""
    forwarded = request.headers.get("x-forwarded-for", "")
    for candidate in forwarded.split(","):
        candidate = candidate.strip()
        try:
            if ipaddress.ip_address(candidate).is_global:
                return candidate
        except ValueError:
            continue
    if request.client and request.client.host:
        return request.client.host
    return "localhost"


def register_request_logging(app: FastAPI) -> None:
    """Install the request-logging middleware on `app`."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if request.url.path.startswith(SKIP_PREFIXES):
            return await call_next(request)
        start = time.perf_counter()
        # Unhandled exceptions propagate past call_next and end up as a 500
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            logger.info(
                "Handler called",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                    "client_ip": client_ip(request),
                },
            )
