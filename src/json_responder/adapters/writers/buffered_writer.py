"""In-memory response writer that produces Starlette responses."""

import logging

from starlette.datastructures import MutableHeaders
from starlette.responses import Response

logger = logging.getLogger(__name__)

DEFAULT_STATUS_CODE = 200


class BufferedResponseWriter:
    """Records status, headers and body in memory.

    Use it inside Starlette endpoints and return ``to_response()``, or inspect
    ``status_code``, ``headers`` and ``body`` directly in tests.
    """

    def __init__(self) -> None:
        """Initialize an empty response."""
        self._headers = MutableHeaders()
        self._sent_headers: dict[str, str] = {}
        self._body = bytearray()
        self.status_code: int | None = None

    @property
    def headers(self) -> MutableHeaders:
        return self._headers

    @property
    def sent_headers(self) -> dict[str, str]:
        """Headers as they were when the status was written."""
        return dict(self._sent_headers)

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def write_header(self, status_code: int) -> None:
        """Record the status code and freeze the headers."""
        if self.status_code is not None:
            logger.warning(
                f"Ignoring superfluous write_header({int(status_code)}), "
                f"status {self.status_code} already written"
            )
            return
        self.status_code = int(status_code)
        self._sent_headers = dict(self._headers.items())

    def write(self, data: bytes) -> int:
        """Append to the body, writing status 200 first if needed."""
        if self.status_code is None:
            self.write_header(DEFAULT_STATUS_CODE)
        self._body.extend(data)
        return len(data)

    def to_response(self) -> Response:
        """Build a Starlette response from what was written.

        A writer nothing was written to becomes an empty 200 response.
        """
        if self.status_code is None:
            self.write_header(DEFAULT_STATUS_CODE)
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=self.sent_headers,
        )
