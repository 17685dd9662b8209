"""Pydantic schemas for the login stub."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LoginResponse(BaseModel):
    """Login stub response.

    ``authenticated`` is always False: no credential check takes place.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    authenticated: bool = False
    user_data: Any | None = Field(default=None, alias="userData")
