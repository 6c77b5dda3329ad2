"""Domain layer - response models, typed errors and contracts."""

from json_responder.domain.errors import (
    BadRequestError,
    ForbiddenError,
    HttpError,
    InternalServerError,
    NotFoundError,
    PayloadTooLargeError,
    SerializationError,
    TeapotError,
    UnauthorizedError,
    WriteError,
)
from json_responder.domain.models import ErrorResponse, status_text

__all__ = [
    "BadRequestError",
    "ErrorResponse",
    "ForbiddenError",
    "HttpError",
    "InternalServerError",
    "NotFoundError",
    "PayloadTooLargeError",
    "SerializationError",
    "TeapotError",
    "UnauthorizedError",
    "WriteError",
    "status_text",
]
