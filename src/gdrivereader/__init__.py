"""gdrivereader public API."""

from __future__ import annotations

from gdrivereader.auth import (
    AccessType,
    AuthConfig,
    AuthPrompt,
    OAuthHandle,
    Scope,
    Token,
)
from gdrivereader.client import (
    ClientConfig,
    Corpora,
    DriveClient,
    EventEmitter,
    EventType,
    QuerySpace,
    ResponseAlt,
    SortBy,
)
from gdrivereader.errors import (
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
    map_http_error,
)
from gdrivereader.models import CacheEntry, DriveFile

__all__ = [
    # High-level
    "DriveClient",
    "ClientConfig",
    "EventEmitter",
    "EventType",
    # Auth
    "AuthConfig",
    "Token",
    "OAuthHandle",
    "Scope",
    "AccessType",
    "AuthPrompt",
    # Query parameters / Models
    "QuerySpace",
    "Corpora",
    "SortBy",
    "ResponseAlt",
    "DriveFile",
    "CacheEntry",
    # Errors
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
    "map_http_error",
]
