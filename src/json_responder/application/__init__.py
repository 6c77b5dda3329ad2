"""Application layer - the responders."""

from json_responder.application.error_responder import ErrorResponder
from json_responder.application.responder import Responder

__all__ = [
    "ErrorResponder",
    "Responder",
]
