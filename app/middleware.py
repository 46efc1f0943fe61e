# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP Middleware — request IDs with an access log, and Prometheus request metrics.
"""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger
from app.metrics import REQUEST_COUNT, REQUEST_LATENCY, HTTP_ERRORS

# Ops and asset paths stay out of metrics and the access log.
QUIET_PREFIXES: tuple[str, ...] = (
    "/health", "/metrics", "/openapi.json", "/docs", "/redoc", "/static/",
)


def is_quiet(path: str) -> bool:
    return path.startswith(QUIET_PREFIXES)


def route_label(request: Request) -> str:
    """Route template ("/api/v1/content"), never the raw URL, to bound label cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Propagate or generate X-Request-ID and write one access line per request."""

    def __init__(self, app, logger_name: str = "est-api"):
        super().__init__(app)
        self.logger = get_logger(f"{logger_name}.access")

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        if not is_quiet(request.url.path):
            self.logger.info(
                "%s %s -> %d", request.method, request.url.path, response.status_code,
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                },
            )
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Count requests, errors and latency per route template."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        if is_quiet(request.url.path):
            return response

        endpoint = route_label(request)
        status = str(response.status_code)
        REQUEST_COUNT.labels(method=request.method, endpoint=endpoint, status=status).inc()
        REQUEST_LATENCY.labels(method=request.method, endpoint=endpoint).observe(
            time.perf_counter() - start
        )
        if response.status_code >= 400:
            HTTP_ERRORS.labels(method=request.method, endpoint=endpoint, status=status).inc()
        return response
