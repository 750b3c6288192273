"""
Request context middleware.

Binds a request id to every log line emitted while a request is handled and
returns it in the X-Request-ID response header.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from artifact_store.infrastructure.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Scopes structlog context variables to a single request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = uuid.uuid4().hex
        request.state.request_id = request_id
        bind_context(request_id=request_id, method=request.method, path=request.url.path)

        started = time.monotonic()
        try:
            response = await call_next(request)
            elapsed = time.monotonic() - started
            response.headers["X-Request-ID"] = request_id
            logger.debug(
                "Request completed",
                status_code=response.status_code,
                process_time=f"{elapsed:.3f}s",
            )
            return response
        except Exception:
            logger.exception("Request failed")
            raise
        finally:
            clear_context()
