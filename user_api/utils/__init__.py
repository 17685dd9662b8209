"""Utility functions and helpers."""

from .exceptions import (
    ApiError,
    raise_conflict,
    raise_internal_error,
    raise_not_found,
)

__all__ = [
    "ApiError",
    "raise_conflict",
    "raise_internal_error",
    "raise_not_found",
]
