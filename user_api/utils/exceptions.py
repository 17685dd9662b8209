"""Common exception utilities for FastAPI routers."""

from typing import NoReturn

from fastapi import HTTPException, status
from fastapi.responses import JSONResponse


class ApiError(HTTPException):
    """HTTPException rendered as a flat JSON object ``{key: detail}``.

    Not-found responses use ``message``; conflicts and faults use ``error``.
    """

    def __init__(self, status_code: int, detail: str, *, key: str = "error") -> None:
        super().__init__(status_code=status_code, detail=detail)
        self.key = key

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content={self.key: self.detail})


def raise_not_found(message: str, *, cause: Exception | None = None) -> NoReturn:
    raise ApiError(
        status.HTTP_404_NOT_FOUND,
        message,
        key="message",
    ) from cause


def raise_conflict(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise ApiError(
        status.HTTP_409_CONFLICT,
        detail,
    ) from cause


def raise_internal_error(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise ApiError(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail,
    ) from cause
