"""Writes JSON payloads to HTTP responses."""

import logging
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from json_responder.domain.errors import WriteError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from json_responder.domain.contracts.payload_encoder import PayloadEncoderProtocol
    from json_responder.domain.contracts.response_writer import ResponseWriterProtocol
    from json_responder.domain.contracts.responder_settings import ResponderSettingsProtocol

JSON_CONTENT_TYPE = "application/json"


class Responder:
    """Writes a status code and a JSON body to a response writer."""

    def __init__(
        self,
        settings: "ResponderSettingsProtocol",
        encoder: "PayloadEncoderProtocol",
    ) -> None:
        """Initialize with settings and a payload encoder."""
        self._settings = settings
        self._encoder = encoder

    @property
    def settings(self) -> "ResponderSettingsProtocol":
        return self._settings

    def respond(
        self, writer: "ResponseWriterProtocol", status_code: int, payload: Any = None
    ) -> None:
        """Write ``payload`` as JSON with the given status code.

        The content type and status are always written. The body is skipped when
        the payload is ``None`` and nulls are disabled in the settings.

        Raises:
            SerializationError: If the payload cannot be encoded.
            WriteError: If the status or body cannot be written to the writer.
        """
        writer.headers["Content-Type"] = JSON_CONTENT_TYPE
        try:
            writer.write_header(status_code)
        except OSError as e:
            logger.error(f"Failed to write {status_code} response status: {e}")
            raise WriteError.wrap(e, "failed to write bytes") from e

        if payload is None and not self._settings.return_nulls:
            logger.debug(f"Responded {status_code} with empty body")
            return

        body = self._encoder.encode(payload)

        try:
            writer.write(body)
        except OSError as e:
            logger.error(f"Failed to write {len(body)} byte response body: {e}")
            raise WriteError.wrap(e, "failed to write bytes") from e

        logger.debug(f"Responded {status_code} with {len(body)} byte body")

    def ok(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 200 OK."""
        self.respond(writer, HTTPStatus.OK, payload)

    def bad_request(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 400 Bad Request."""
        self.respond(writer, HTTPStatus.BAD_REQUEST, payload)

    def unauthorized(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 401 Unauthorized."""
        self.respond(writer, HTTPStatus.UNAUTHORIZED, payload)

    def forbidden(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 403 Forbidden."""
        self.respond(writer, HTTPStatus.FORBIDDEN, payload)

    def not_found(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 404 Not Found."""
        self.respond(writer, HTTPStatus.NOT_FOUND, payload)

    def too_large(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 413 Request Entity Too Large."""
        self.respond(writer, HTTPStatus.REQUEST_ENTITY_TOO_LARGE, payload)

    def teapot(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 418 I'm a Teapot."""
        self.respond(writer, HTTPStatus.IM_A_TEAPOT, payload)

    def internal_error(self, writer: "ResponseWriterProtocol", payload: Any = None) -> None:
        """Respond with 500 Internal Server Error."""
        self.respond(writer, HTTPStatus.INTERNAL_SERVER_ERROR, payload)
