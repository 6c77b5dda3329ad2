"""Payload encoding adapters."""

from json_responder.adapters.encoding.pydantic_encoder import PydanticJsonEncoder

__all__ = ["PydanticJsonEncoder"]
