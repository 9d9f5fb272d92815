"""Lifecycle events emitted by DriveClient."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable

Listener = Callable[[Any], None]


class EventType(str, Enum):
    REFRESH_TOKEN_ERROR = "RefreshTokenError"
    REFRESHED_ACCESS_TOKEN = "RefreshedAccessToken"
    FOUND_FILE = "FoundFile"
    # Declared for listeners; DriveClient does not currently emit it.
    FILE_NOT_FOUND = "FileNotFound"


class EventEmitter:
    """
    Synchronous in-process observer registry.

    Listeners run on the emitting thread in registration order. Events with
    no listeners are dropped and nothing is replayed to late subscribers.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventType, list[Listener]] = {}
        self._lock = threading.Lock()

    def on(self, event: EventType, listener: Listener) -> None:
        with self._lock:
            self._listeners.setdefault(event, []).append(listener)

    def off(self, event: EventType, listener: Listener) -> None:
        """Remove one registration of listener; unknown listeners are ignored."""
        with self._lock:
            listeners = self._listeners.get(event, [])
            if listener in listeners:
                listeners.remove(listener)

    def emit(self, event: EventType, payload: Any = None) -> None:
        with self._lock:
            listeners = list(self._listeners.get(event, ()))
        for listener in listeners:
            listener(payload)

    def listener_count(self, event: EventType) -> int:
        with self._lock:
            return len(self._listeners.get(event, ()))
