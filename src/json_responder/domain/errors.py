"""Typed HTTP errors.

Each error carries the status code and client-facing message it should be
rendered with. They satisfy ``ClassifiableErrorProtocol``, so handing one to
``ErrorResponder.respond_error`` produces a response with that status and
message instead of the configured fallback.
"""

from http import HTTPStatus
from typing import TypeVar

_E = TypeVar("_E", bound="HttpError")


class HttpError(Exception):
    """Base error with an HTTP status code and message."""

    default_status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "", *, status_code: int | None = None) -> None:
        """Initialize the error.

        Args:
            message: Message shown to the client. May be empty, in which case the
                standard reason phrase of the status code is used when rendering.
            status_code: Overrides the class default status code.
        """
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code if status_code is not None else self.default_status_code)

    @classmethod
    def wrap(cls: type[_E], cause: BaseException, message: str = "") -> _E:
        """Create an error of this type chained to ``cause``."""
        error = cls(message)
        error.__cause__ = cause
        return error

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is None:
            return self.message
        if not self.message:
            return str(cause)
        return f"{self.message}: {cause}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class BadRequestError(HttpError):
    default_status_code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(HttpError):
    default_status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(HttpError):
    default_status_code = HTTPStatus.FORBIDDEN


class NotFoundError(HttpError):
    default_status_code = HTTPStatus.NOT_FOUND


class PayloadTooLargeError(HttpError):
    default_status_code = HTTPStatus.REQUEST_ENTITY_TOO_LARGE


class TeapotError(HttpError):
    default_status_code = HTTPStatus.IM_A_TEAPOT


class InternalServerError(HttpError):
    default_status_code = HTTPStatus.INTERNAL_SERVER_ERROR


class SerializationError(InternalServerError):
    """Raised when a payload cannot be encoded as JSON."""


class WriteError(InternalServerError):
    """Raised when the response body cannot be written to the transport."""
