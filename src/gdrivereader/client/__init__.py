"""Public client exports for gdrivereader."""

from __future__ import annotations

from .config import DEFAULT_CACHE_MAX_AGE, DEFAULT_CACHE_SIZE, ClientConfig
from .drive_client import DriveClient
from .events import EventEmitter, EventType
from .params import (
    DOWNLOAD_TIMEOUT_MS,
    Corpora,
    QuerySpace,
    ResponseAlt,
    SortBy,
    build_name_query,
    escape_query_value,
)

__all__ = [
    "DriveClient",
    "ClientConfig",
    "DEFAULT_CACHE_SIZE",
    "DEFAULT_CACHE_MAX_AGE",
    "EventEmitter",
    "EventType",
    "QuerySpace",
    "Corpora",
    "SortBy",
    "ResponseAlt",
    "DOWNLOAD_TIMEOUT_MS",
    "build_name_query",
    "escape_query_value",
]
