"""Wiring of the default responder."""

import logging

from json_responder.adapters.config import ResponderConfig
from json_responder.adapters.encoding import PydanticJsonEncoder
from json_responder.application import ErrorResponder

logger = logging.getLogger(__name__)


def create_responder(config: ResponderConfig | None = None) -> ErrorResponder:
    """Create an error responder with the pydantic JSON encoder.

    Args:
        config: Responder settings. Loaded from the environment when omitted.
    """
    if config is None:
        config = ResponderConfig()
    logger.debug(
        f"Creating responder: return_nulls={config.return_nulls}, "
        f"default_status_code={config.default_status_code}, "
        f"return_raw_error={config.return_raw_error}"
    )
    return ErrorResponder(config, PydanticJsonEncoder())
