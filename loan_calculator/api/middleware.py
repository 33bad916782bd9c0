"""FastAPI middleware for request tracing and metrics"""

import uuid
import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from loan_calculator.infrastructure.observability.metrics import request_duration_histogram


def endpoint_label(request: Request) -> str:
    """Route template for metric labels, so path values do not multiply series"""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a request ID, reusing the caller's X-Request-ID when present"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        logging.debug(
            "Request completed",
            extra={"request_id": request_id, "path": request.url.path, "status": response.status_code},
        )
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record HTTP request latency per route"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()

        response = await call_next(request)

        request_duration_histogram.labels(
            method=request.method,
            endpoint=endpoint_label(request),
            status=response.status_code,
        ).observe(time.perf_counter() - start_time)

        return response
