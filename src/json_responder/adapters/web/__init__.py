"""Starlette web adapters."""

from json_responder.adapters.web.error_middleware import ErrorResponseMiddleware

__all__ = ["ErrorResponseMiddleware"]
