"""Exception hierarchy and HTTP error mapping for gdrivereader."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional


class DriveClientError(Exception):
    """
    Base exception for gdrivereader.

    Attributes:
        details: Optional structured information (e.g., HTTP status, file name).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidArgumentError(DriveClientError):
    """Raised when configuration or call arguments are invalid."""


class AuthError(DriveClientError):
    """Raised when Drive rejects the request credentials (HTTP 401)."""


class PermissionError(DriveClientError):
    """Raised when access is denied (HTTP 403)."""


class NotFoundError(DriveClientError):
    """Raised when no file matches a lookup, or Drive answers HTTP 404."""


class RateLimitError(DriveClientError):
    """Raised when rate-limited (HTTP 429)."""


class ApiError(DriveClientError):
    """Raised for any other non-success HTTP status."""


class MalformedResponseError(DriveClientError):
    """Raised when a successful response lacks the expected payload shape."""


class NoDataError(DriveClientError):
    """Raised when a content request succeeds but carries no data."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdrivereader exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


def status_message(status_code: int) -> str:
    return f"Server returned HTTP status {status_code}"


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> DriveClientError:
    """
    Map a non-success HTTP status to a gdrivereader exception.

    The message is always "Server returned HTTP status <code>"; Drive's own
    error message, when present, is kept under details["api_message"].

    Policy:
        - 401 -> AuthError
        - 403 -> PermissionError
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.message:
        details["api_message"] = info.message
    if info.details:
        details.update(info.details)

    message = status_message(info.status_code)

    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)


def http_error_to_info(exc: Any) -> HttpErrorInfo:
    """Extract status, reason and Drive's error payload from an ``HttpError``."""
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if isinstance(status_code, str) and status_code.isdigit():
        status_code = int(status_code)
    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message if isinstance(message, str) else None,
        details=details or None,
    )
