"""Base schema classes and shared response bodies."""

from pydantic import BaseModel, ConfigDict


class BaseResponse(BaseModel):
    """Base for all response schemas with from_attributes config."""

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Informational body, also used for 404 responses."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for conflicts and internal faults."""

    error: str
