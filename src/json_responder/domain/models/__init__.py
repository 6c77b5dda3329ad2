"""Domain models for JSON responses."""

from json_responder.domain.models.error_response import ErrorResponse
from json_responder.domain.models.http_status import status_text

__all__ = [
    "ErrorResponse",
    "status_text",
]
