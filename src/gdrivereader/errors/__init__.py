"""Public error exports for gdrivereader."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    DriveClientError,
    HttpErrorInfo,
    InvalidArgumentError,
    MalformedResponseError,
    NoDataError,
    NotFoundError,
    PermissionError,
    RateLimitError,
    http_error_to_info,
    map_http_error,
)

__all__ = [
    "DriveClientError",
    "InvalidArgumentError",
    "AuthError",
    "PermissionError",
    "NotFoundError",
    "RateLimitError",
    "ApiError",
    "MalformedResponseError",
    "NoDataError",
    "HttpErrorInfo",
    "http_error_to_info",
    "map_http_error",
]
