"""Protocol for payload encoding."""

from typing import Any, Protocol


class PayloadEncoderProtocol(Protocol):
    """Protocol for turning response payloads into JSON bytes."""

    def encode(self, payload: Any) -> bytes:
        """Encode a payload as compact JSON.

        Args:
            payload: Any value to encode. ``None`` encodes as ``null``.

        Returns:
            The JSON document as bytes.

        Raises:
            SerializationError: If the payload cannot be encoded.
        """
        ...
