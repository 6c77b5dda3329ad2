"""JSON payload encoder backed by pydantic-core."""

import logging
from typing import Any

from pydantic_core import PydanticSerializationError, to_json

from json_responder.domain.errors import SerializationError

logger = logging.getLogger(__name__)


class PydanticJsonEncoder:
    """Encodes payloads as compact JSON.

    Pydantic models are serialized by alias, and dataclasses, datetimes, UUIDs,
    enums and plain containers are handled natively.
    """

    def encode(self, payload: Any) -> bytes:
        """Encode a payload, raising ``SerializationError`` if it is not JSON-encodable."""
        try:
            return to_json(payload, by_alias=True)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.error(f"Failed to encode {type(payload).__name__} payload: {e}")
            raise SerializationError.wrap(e, "failed to marshal payload") from e
