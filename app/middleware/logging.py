import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def resolve_request_id(request: Request) -> str:
    """Return the id for this request, reusing one sent by the caller."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
    return request_id


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and echoes the request id back to the client."""

    async def dispatch(self, request: Request, call_next):
        request_id = resolve_request_id(request)
        route = f"{request.method} {request.url.path}"
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            # the 500 body and its header come from the global exception handler
            logger.error(f"[{request_id}] {route} - unhandled error ({_elapsed_ms(started)}ms)")
            raise

        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(level, f"[{request_id}] {route} - {response.status_code} ({_elapsed_ms(started)}ms)")
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
