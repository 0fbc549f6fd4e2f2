"""
Request Context Middleware.

Every response carries X-Request-ID (echoed from the request or freshly
generated) and X-Response-Time. While a request is handled its id, method
and path are bound to the structlog contextvars, so repository and store
records can be traced back to the request that caused them.
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notekeeper.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags requests with an id and timing; one log line per request."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        # read by the exception handlers for the error envelope
        request.state.request_id = request_id
        started = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request raised",
                extra={"duration_ms": _elapsed_ms(started), "error_type": type(exc).__name__},
            )
            raise
        else:
            duration_ms = _elapsed_ms(started)
            response.headers[REQUEST_ID_HEADER] = request_id
            response.headers[RESPONSE_TIME_HEADER] = f"{duration_ms}ms"
            logger.info(
                "Request handled",
                extra={"status_code": response.status_code, "duration_ms": duration_ms},
            )
            return response
        finally:
            structlog.contextvars.clear_contextvars()
