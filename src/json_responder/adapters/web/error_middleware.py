"""Middleware rendering unhandled exceptions as JSON error responses."""

import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from json_responder.adapters.writers.buffered_writer import BufferedResponseWriter
from json_responder.domain.contracts.error_responder import ErrorResponderProtocol

logger = logging.getLogger(__name__)


class ErrorResponseMiddleware(BaseHTTPMiddleware):
    """Middleware turning exceptions raised by the app into JSON error responses."""

    def __init__(
        self,
        app: Callable,
        responder: ErrorResponderProtocol,
        fallback_status_code: int | None = None,
    ) -> None:
        """Initialize error middleware.

        Args:
            app: The ASGI application to wrap.
            responder: Responder used to render caught exceptions.
            fallback_status_code: Status for exceptions that carry none of their
                own. Defaults to the responder's configured default status code.
        """
        super().__init__(app)
        self.responder = responder
        self.fallback_status_code = fallback_status_code

    def _create_error_response(self, error: Exception) -> Response:
        """Render an exception through the responder."""
        writer = BufferedResponseWriter()
        if self.fallback_status_code is None:
            self.responder.respond_error(writer, error)
        else:
            self.responder.respond_error_fallback(writer, error, self.fallback_status_code)
        return writer.to_response()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and render any exception it raises."""
        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Unhandled {type(e).__name__} on {request.method} {request.url.path}: {e}",
                exc_info=True,
            )
            return self._create_error_response(e)
        return response
