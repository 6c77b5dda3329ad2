"""Error response domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class ErrorResponse(BaseModel):
    """JSON body sent to the client for error replies."""

    model_config = ConfigDict(frozen=True)

    message: str
    raw_error: str | None = Field(default=None, serialization_alias="rawError")

    @model_serializer(mode="wrap")
    def _omit_unset_raw_error(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if self.raw_error is None:
            data.pop("rawError", None)
            data.pop("raw_error", None)
        return data
