"""JSON responses and error bodies for HTTP servers."""

from json_responder.adapters import (
    BufferedResponseWriter,
    ErrorResponseMiddleware,
    HandlerResponseWriter,
    PydanticJsonEncoder,
    ResponderConfig,
)
from json_responder.application import ErrorResponder, Responder
from json_responder.domain import (
    BadRequestError,
    ErrorResponse,
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
from json_responder.factory import create_responder

__all__ = [
    "BadRequestError",
    "BufferedResponseWriter",
    "ErrorResponder",
    "ErrorResponse",
    "ErrorResponseMiddleware",
    "ForbiddenError",
    "HandlerResponseWriter",
    "HttpError",
    "InternalServerError",
    "NotFoundError",
    "PayloadTooLargeError",
    "PydanticJsonEncoder",
    "Responder",
    "ResponderConfig",
    "SerializationError",
    "TeapotError",
    "UnauthorizedError",
    "WriteError",
    "create_responder",
]
