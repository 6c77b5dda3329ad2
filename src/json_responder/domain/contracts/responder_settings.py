"""Protocol for responder settings."""

from typing import Protocol


class ResponderSettingsProtocol(Protocol):
    """Read-only settings consulted by the responder on every response."""

    @property
    def return_nulls(self) -> bool:
        """Whether a ``None`` payload is written as a ``null`` body."""
        ...

    @property
    def default_status_code(self) -> int:
        """Status code used for errors that carry none of their own."""
        ...

    @property
    def default_error_message(self) -> str:
        """Message used for errors that carry none of their own."""
        ...

    @property
    def return_raw_error(self) -> bool:
        """Whether the error's own text is echoed in the ``rawError`` field."""
        ...
