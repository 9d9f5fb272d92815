"""Public model exports for gdrivereader."""

from __future__ import annotations

from .cache_entry import CacheEntry
from .drive_file import DriveFile

__all__ = ["DriveFile", "CacheEntry"]
