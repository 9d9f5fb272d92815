"""Value stored in the client's bounded content cache."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CacheEntry:
    """File content cached under its file name."""

    name: str
    content: str

    @property
    def size(self) -> int:
        """Size in bytes counted against the cache budget."""
        return len(self.content.encode("utf-8"))
