"""Request logging middleware: one line per request with method, path, status, duration and caller."""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

# Slack resends a slash command that was not answered in time and numbers the attempts.
SLACK_RETRY_HEADER = "X-Slack-Retry-Num"


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else ""


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        retry = request.headers.get(SLACK_RETRY_HEADER)
        if retry:
            logger.info(
                "request method=%s path=%s status=%s duration_ms=%.1f client=%s slack_retry=%s",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                _client_ip(request),
                retry,
            )
        else:
            logger.info(
                "request method=%s path=%s status=%s duration_ms=%.1f client=%s",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                _client_ip(request),
            )
        return response
