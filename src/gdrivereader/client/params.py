"""Drive v3 request parameter values and query helpers."""

from __future__ import annotations

from enum import Enum

# Milliseconds; applied as the HTTP timeout of media downloads.
DOWNLOAD_TIMEOUT_MS: int = 10000


class QuerySpace(str, Enum):
    """Scope of a file query in terms of item type."""

    DRIVE = "drive"
    PHOTOS = "photos"
    APP_DATA_FOLDER = "appDataFolder"


class Corpora(str, Enum):
    """Scope of a file query in terms of owner."""

    USER = "user"
    DOMAIN = "domain"
    TEAM_DRIVE = "teamDrive"
    # Must be combined with USER; all other values are used alone.
    ALL_TEAM_DRIVES = "allTeamDrives,user"


class SortBy(str, Enum):
    """Sort keys accepted in ``orderBy`` (append " desc" to reverse)."""

    CREATE_TIME = "createdTime"
    FOLDER = "folder"
    MODIFIED_BY_ME_TIME = "modifiedByMeTime"
    MODIFIED_TIME = "modifiedTime"
    NAME = "name"
    NATURAL_NAME = "name_natural"
    QUOTA_BYTES_USED = "quotaBytesUsed"
    RECENCY = "recency"
    SHARED_WITH_ME_TIME = "sharedWithMeTime"
    STARRED = "starred"
    VIEWED_BY_ME_TIME = "viewedByMeTime"


class ResponseAlt(str, Enum):
    """Set ``alt`` to MEDIA to download file content instead of metadata."""

    MEDIA = "media"


def escape_query_value(value: str) -> str:
    """Escape a string literal for the Drive search query language."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_name_query(file_name: str, folder_id: str) -> str:
    return (
        f"name = '{escape_query_value(file_name)}' "
        f"and '{escape_query_value(folder_id)}' in parents"
    )
