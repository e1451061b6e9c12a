"""Middleware for request metrics using FastAPI's middleware system."""

from functools import cache
from http import HTTPStatus
from time import monotonic

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from iconfinder.metrics import get_metrics_client
from iconfinder.middleware import ScopeKey

# Paths with their own metric name. Anything else is an icon lookup whose path is
# the target URL, so all of them are counted under "icon".
KNOWN_PATHS: frozenset[str] = frozenset(
    ["/api/v1/icons", "/__heartbeat__", "/__lbheartbeat__", "/__version__", "/__error__"]
)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Time every request and count its status code, grouped by endpoint."""

    @cache
    def _build_metric_name(self, method: str, path: str) -> str:
        endpoint = path.lstrip("/").replace("/", ".") if path in KNOWN_PATHS else "icon"
        return f"{method}.{endpoint}".lower()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Record timing and status code metrics around the endpoint call."""
        metrics_client = get_metrics_client()
        # Endpoints read the client from the scope to count icon lookup outcomes.
        request.scope[ScopeKey.METRICS_CLIENT] = metrics_client

        metric_name = self._build_metric_name(request.method, request.url.path)
        status_code = HTTPStatus.INTERNAL_SERVER_ERROR.value
        started_at = monotonic()
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            metrics_client.timing(f"{metric_name}.timing", value=(monotonic() - started_at) * 1000)
            metrics_client.increment(f"{metric_name}.status_codes.{status_code}")
            metrics_client.increment(f"response.status_codes.{status_code}")
