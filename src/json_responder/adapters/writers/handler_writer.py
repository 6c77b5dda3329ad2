"""Response writer over the standard library HTTP server."""

import logging
from http.server import BaseHTTPRequestHandler

from starlette.datastructures import MutableHeaders

logger = logging.getLogger(__name__)


class HandlerResponseWriter:
    """Streams a response through a ``BaseHTTPRequestHandler``.

    The status line and headers are sent on ``write_header``; body bytes go
    straight to ``handler.wfile``, so connection failures surface as ``OSError``.
    Without a ``Content-Length`` header the body is delimited by closing the
    connection, which keeps HTTP/1.1 keep-alive clients from waiting for more.
    """

    def __init__(self, handler: BaseHTTPRequestHandler) -> None:
        """Initialize with the request handler serving the current request."""
        self._handler = handler
        self._headers = MutableHeaders()
        self._wrote_header = False

    @property
    def headers(self) -> MutableHeaders:
        return self._headers

    def write_header(self, status_code: int) -> None:
        """Send the status line followed by the current headers."""
        if self._wrote_header:
            logger.warning(f"Ignoring superfluous write_header({int(status_code)})")
            return
        if "content-length" not in self._headers:
            self._headers["Connection"] = "close"
            self._handler.close_connection = True
        self._handler.send_response(int(status_code))
        for key, value in self._headers.items():
            self._handler.send_header(key, value)
        self._handler.end_headers()
        self._wrote_header = True

    def write(self, data: bytes) -> int:
        """Write body bytes to the client."""
        if not self._wrote_header:
            self.write_header(200)
        self._handler.wfile.write(data)
        return len(data)
