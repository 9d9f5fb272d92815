"""Data model for Drive file metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class DriveFile:
    """
    File metadata as returned by ``files.list``.

    Only the fields Drive returns by default are kept.
    """

    id: str
    name: str
    mime_type: str
    kind: str = "drive#file"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> DriveFile:
        file_id = data.get("id")
        name = data.get("name")
        mime_type = data.get("mimeType")
        kind = data.get("kind")
        return cls(
            id=file_id if isinstance(file_id, str) else "",
            name=name if isinstance(name, str) else "",
            mime_type=mime_type if isinstance(mime_type, str) else "",
            kind=kind if isinstance(kind, str) else "drive#file",
        )
