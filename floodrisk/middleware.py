"""FastAPI middleware for Prometheus metrics instrumentation."""
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from floodrisk.metrics import (
    HTTP_REQUESTS_TOTAL,
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect HTTP request metrics for Prometheus."""

    # Endpoints to exclude from metrics (like /metrics itself)
    EXCLUDE_PATHS = {"/metrics", "/health", "/ping"}

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and collect metrics."""
        path = request.url.path
        method = request.method

        if path in self.EXCLUDE_PATHS:
            return await call_next(request)

        endpoint = normalize_endpoint(path)

        HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration = time.perf_counter() - start_time
            HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method, endpoint=endpoint
            ).observe(duration)
            HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()
            HTTP_REQUESTS_TOTAL.labels(
                method=method, endpoint=endpoint, status_code=str(status_code)
            ).inc()

        return response


def normalize_endpoint(path: str) -> str:
    """Normalize URL path to avoid high cardinality from path parameters.

    Converts paths like /api/forecasts/3f2a...e9 to /api/forecasts/{id}
    """
    segments = path.strip("/").split("/")
    normalized = ["{id}" if _is_id_segment(s) else s for s in segments if s]
    return "/" + "/".join(normalized) if normalized else "/"


def _is_id_segment(segment: str) -> bool:
    """Check if a path segment looks like an ID."""
    # uuid4 hex ids, dashed UUIDs, or long numeric ids
    if len(segment) >= 20 and segment.replace("-", "").isalnum():
        return True
    return segment.isdigit() and len(segment) >= 5
