"""Protocol for HTTP response sinks."""

from collections.abc import MutableMapping
from typing import Protocol


class ResponseWriterProtocol(Protocol):
    """Sink for a single HTTP response: headers, then status, then body bytes."""

    @property
    def headers(self) -> MutableMapping[str, str]:
        """Response headers. Changes after ``write_header`` have no effect."""
        ...

    def write_header(self, status_code: int) -> None:
        """Send the status line and headers.

        Args:
            status_code: HTTP status code. Only the first call takes effect.
        """
        ...

    def write(self, data: bytes) -> int:
        """Write body bytes, sending status 200 first if no status was written.

        Args:
            data: Bytes to append to the body.

        Returns:
            Number of bytes written.

        Raises:
            OSError: If the underlying transport fails.
        """
        ...
