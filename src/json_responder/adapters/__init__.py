"""Adapters layer - configuration, encoding and HTTP integrations."""

from json_responder.adapters.config import ResponderConfig
from json_responder.adapters.encoding import PydanticJsonEncoder
from json_responder.adapters.web import ErrorResponseMiddleware
from json_responder.adapters.writers import BufferedResponseWriter, HandlerResponseWriter

__all__ = [
    "BufferedResponseWriter",
    "ErrorResponseMiddleware",
    "HandlerResponseWriter",
    "PydanticJsonEncoder",
    "ResponderConfig",
]
