"""Response writer adapters."""

from json_responder.adapters.writers.buffered_writer import BufferedResponseWriter
from json_responder.adapters.writers.handler_writer import HandlerResponseWriter

__all__ = [
    "BufferedResponseWriter",
    "HandlerResponseWriter",
]
