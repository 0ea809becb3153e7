"""In-memory session storage."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional

import structlog

from hybridauth.core.storage import Storage

log = structlog.get_logger()


class MemoryStorage(Storage):
    """
    Session storage kept in a process-local dict.

    This is the default storage when none is injected. Data lives as long
    as the instance, so one instance represents one user session. Good for
    tests, CLIs and single-process apps; use DynamoDBStorage when several
    processes serve the same session.

    Example:
        storage = MemoryStorage()
        storage.set("google.access_token", "ya29...")
        storage.get("google.access_token")
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def delete_match(self, prefix: str) -> None:
        with self._lock:
            doomed = [key for key in self._data if key.startswith(prefix)]
            for key in doomed:
                del self._data[key]
        log.debug("Deleted session keys", prefix=prefix, count=len(doomed))

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
