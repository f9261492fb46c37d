"""Trace middleware to inject a trace_id per request.

- Adds X-Trace-Id response header (reuses the incoming one if present)
- Binds trace_id into structlog contextvars so every log line carries it
- Exposes get_trace_id() helper for code outside request handlers
"""

from contextvars import ContextVar
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from uuid_extensions import uuid7

TRACE_HEADER = "X-Trace-Id"

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID (None outside of a request)."""
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects a trace ID into each request context."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Set the trace ID, run the request, and echo the ID back.

        Args:
            request: Incoming request.
            call_next: Next handler.

        Returns:
            Response with the X-Trace-Id header added.
        """
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid7())
        trace_id_context.set(trace_id)
        request.state.trace_id = trace_id
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
            trace_id_context.set(None)
