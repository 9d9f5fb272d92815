"""OAuth scopes and authorization URL options for Google Drive."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Scope(str, Enum):
    """
    Google access scopes.

    These values inform the consent screen Google shows to the user. Fewer
    scopes make consent more likely.

    See https://developers.google.com/drive/web/scopes
    """

    DRIVE_READ_WRITE = "https://www.googleapis.com/auth/drive"
    DRIVE_METADATA = "https://www.googleapis.com/auth/drive.metadata"
    DRIVE_READ_ONLY = "https://www.googleapis.com/auth/drive.readonly"
    DRIVE_METADATA_READ_ONLY = "https://www.googleapis.com/auth/drive.metadata.readonly"
    PHOTO_READ_ONLY = "https://www.googleapis.com/auth/drive.photos.readonly"
    CALENDAR = "https://www.googleapis.com/auth/calendar"


class AccessType(str, Enum):
    """
    Whether the application can refresh access tokens while the user is away.

    OFFLINE makes Google return a refresh token the first time an
    authorization code is exchanged.
    """

    OFFLINE = "offline"
    ONLINE = "online"


class AuthPrompt(str, Enum):
    """Prompts to present the user during authorization."""

    NONE = "none"
    CONSENT = "consent"
    SELECT_ACCOUNT = "select_account"


DEFAULT_SCOPES: tuple[Scope, ...] = (
    Scope.DRIVE_READ_ONLY,
    Scope.DRIVE_METADATA_READ_ONLY,
)


def normalize_scopes(scope: Scope | str | Iterable[Scope | str]) -> tuple[Scope, ...]:
    """Return one-or-many scopes as a non-empty tuple of Scope members."""
    if isinstance(scope, (Scope, str)):
        items = [scope]
    else:
        items = list(scope)

    if not items:
        raise ValueError("scope must name at least one Scope")

    # Scope(...) raises ValueError for unknown URLs.
    return tuple(Scope(s) for s in items)
