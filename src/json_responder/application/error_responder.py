"""Renders exceptions as JSON error responses."""

import logging
from typing import TYPE_CHECKING

from json_responder.application.responder import Responder
from json_responder.domain.contracts.classifiable_error import ClassifiableErrorProtocol
from json_responder.domain.models import ErrorResponse, status_text

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from json_responder.domain.contracts.response_writer import ResponseWriterProtocol


class ErrorResponder(Responder):
    """Responder that also turns exceptions into ``ErrorResponse`` bodies."""

    def respond_error(self, writer: "ResponseWriterProtocol", error: BaseException) -> None:
        """Respond with ``error``, falling back to the configured default status code."""
        self.respond_error_fallback(writer, error, self._settings.default_status_code)

    def respond_error_fallback(
        self,
        writer: "ResponseWriterProtocol",
        error: BaseException,
        fallback_status_code: int,
    ) -> None:
        """Respond with ``error``, falling back to ``fallback_status_code``.

        Errors exposing their own ``status_code`` and ``message`` are rendered
        with those. Anything else gets the fallback status code and the
        configured default message. An empty message is replaced by the standard
        reason phrase of the chosen status code.

        Raises:
            SerializationError: If the error body cannot be encoded.
            WriteError: If the body cannot be written to the writer.
        """
        status_code, message = self._classify(error, fallback_status_code)
        if not message:
            message = status_text(status_code)

        raw_error = str(error) if self._settings.return_raw_error else None
        error_response = ErrorResponse(message=message, raw_error=raw_error)

        logger.debug(f"Rendering {type(error).__name__} as {status_code}: {message}")
        self.respond(writer, status_code, error_response)

    def _classify(self, error: BaseException, fallback_status_code: int) -> tuple[int, str]:
        """Return the status code and message ``error`` should be rendered with.

        Errors whose ``status_code`` is not an int or whose ``message`` is neither
        a str nor None are treated like plain errors.
        """
        if self._is_classifiable(error):
            return int(error.status_code), error.message or ""  # type: ignore[attr-defined]
        return int(fallback_status_code), self._settings.default_error_message

    @staticmethod
    def _is_classifiable(error: BaseException) -> bool:
        if not isinstance(error, ClassifiableErrorProtocol):
            return False
        status_code = error.status_code
        if isinstance(status_code, bool) or not isinstance(status_code, int):
            logger.warning(
                f"Ignoring non-integer status_code {status_code!r} on {type(error).__name__}"
            )
            return False
        if error.message is not None and not isinstance(error.message, str):
            logger.warning(f"Ignoring non-string message on {type(error).__name__}")
            return False
        return True
