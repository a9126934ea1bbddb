"""Request-scoped logging context."""

import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID and bind it to the log context.

    The ID comes from the X-Request-ID header when the client sends one and
    is generated otherwise. request_id, method and path are bound to
    structlog.contextvars, so the failure events logged by the exception
    handlers can be correlated with the response the client got back. The
    ID is echoed in the X-Request-ID response header.

    Responses produced by the catch-all 500 handler are emitted outside this
    middleware and do not carry the header.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
