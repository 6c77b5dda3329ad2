"""Protocol for errors that know how they should be rendered."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClassifiableErrorProtocol(Protocol):
    """An error exposing its own HTTP status code and client-facing message.

    Any exception with ``status_code`` and ``message`` attributes matches,
    whether or not it derives from ``HttpError``.
    """

    status_code: int
    message: str
