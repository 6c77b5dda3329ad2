"""Configuration adapters."""

from json_responder.adapters.config.responder_config import ResponderConfig

__all__ = ["ResponderConfig"]
