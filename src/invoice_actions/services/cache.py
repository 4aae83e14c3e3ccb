"""Listing cache and the revalidation hook used after writes."""

from __future__ import annotations

import threading
from typing import Any, Dict, Optional, Protocol


class RevalidationPort(Protocol):
    """Anything that can drop a cached page by its path."""

    def revalidate_path(self, path: str) -> None:
        ...


class ListingCache:
    """In-process cache of rendered listings keyed by path."""

    def __init__(self) -> None:
        self._entries: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(path)

    def set(self, path: str, payload: Any) -> None:
        with self._lock:
            self._entries[path] = payload

    def revalidate_path(self, path: str) -> None:
        with self._lock:
            self._entries.pop(path, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._entries
