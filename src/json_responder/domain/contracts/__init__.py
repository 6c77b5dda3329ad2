"""Contracts (protocols) between the responders and their collaborators."""

from json_responder.domain.contracts.classifiable_error import ClassifiableErrorProtocol
from json_responder.domain.contracts.error_responder import ErrorResponderProtocol
from json_responder.domain.contracts.payload_encoder import PayloadEncoderProtocol
from json_responder.domain.contracts.responder_settings import ResponderSettingsProtocol
from json_responder.domain.contracts.response_writer import ResponseWriterProtocol

__all__ = [
    "ClassifiableErrorProtocol",
    "ErrorResponderProtocol",
    "PayloadEncoderProtocol",
    "ResponderSettingsProtocol",
    "ResponseWriterProtocol",
]
