"""
Monitoring and observability utilities.

Provides:
- Prometheus metrics (requests, latencies, errors)
- Request tracing (unique request IDs)
- Request logging
"""
import time
import uuid
import logging
from typing import Callable
from contextvars import ContextVar

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from prometheus_client import Counter, Histogram, Gauge, generate_latest

# Request context variable for tracing
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Prometheus metrics
http_requests_total = Counter(
    'http_requests_total',
    'Total number of HTTP requests',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint', 'status_code'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)
)

http_errors_total = Counter(
    'http_errors_total',
    'Total number of HTTP errors',
    ['method', 'endpoint', 'status_code', 'error_type']
)

service_uptime_seconds = Gauge(
    'service_uptime_seconds',
    'Service uptime in seconds'
)

service_start_time = time.time()

logger = logging.getLogger(__name__)


def get_request_id() -> str:
    """Get the current request ID from context."""
    return request_id_var.get('')


def set_request_id(request_id: str) -> None:
    """Set the request ID in context."""
    request_id_var.set(request_id)


def get_metrics() -> bytes:
    """Render all registered metrics in Prometheus text format."""
    service_uptime_seconds.set(time.time() - service_start_time)
    return generate_latest()


UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """
    Metrics label for a request: the matched route template, never the raw path.

    Record IDs are arbitrary caller strings, so labelling by raw path would
    create one series per ID.
    """
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path or UNMATCHED_ENDPOINT


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging, Prometheus metrics and request tracing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        set_request_id(request_id)

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            endpoint = endpoint_label(request)
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            logger.error(
                f"{request.method} {request.url.path} failed after {duration:.3f}s: {type(e).__name__}",
                exc_info=True,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_seconds": duration,
                }
            )
            http_errors_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=status_code,
                error_type="exception"
            ).inc()
            raise

        status_code = response.status_code
        duration = time.time() - start_time
        endpoint = endpoint_label(request)
        logger.info(
            f"{request.method} {request.url.path} {status_code} {duration:.3f}s",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_seconds": duration,
                "client_ip": request.client.host if request.client else None,
            }
        )

        http_requests_total.labels(
            method=request.method,
            endpoint=endpoint,
            status_code=status_code
        ).inc()
        http_request_duration_seconds.labels(
            method=request.method,
            endpoint=endpoint,
            status_code=status_code
        ).observe(duration)

        if status_code >= 400:
            error_type = "client_error" if status_code < 500 else "server_error"
            http_errors_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=status_code,
                error_type=error_type
            ).inc()

        response.headers["X-Request-ID"] = request_id
        return response
