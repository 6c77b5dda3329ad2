"""Protocol for rendering errors into responses."""

from typing import Protocol

from json_responder.domain.contracts.response_writer import ResponseWriterProtocol


class ErrorResponderProtocol(Protocol):
    """Protocol for writing exceptions as JSON error responses."""

    def respond_error(self, writer: ResponseWriterProtocol, error: BaseException) -> None:
        """Render ``error`` with the configured default status code as fallback."""
        ...

    def respond_error_fallback(
        self,
        writer: ResponseWriterProtocol,
        error: BaseException,
        fallback_status_code: int,
    ) -> None:
        """Render ``error`` with ``fallback_status_code`` as fallback."""
        ...
