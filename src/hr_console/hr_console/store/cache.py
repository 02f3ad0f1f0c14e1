from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Dict, List, Tuple

logger = logging.getLogger(__name__)


class QueryCache:
    """Read cache for list queries, keyed by table name.

    Writers never patch cached rows: they invalidate the key and the next
    reader re-issues the store read (invalidate-and-refetch). A result that
    was loaded while its key got invalidated is returned to that caller but
    not stored. `ttl_seconds=0` disables expiry.
    """

    def __init__(self, *, ttl_seconds: float = 0, clock: Callable[[], float] = time.monotonic):
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: Dict[str, Tuple[float, List[Any]]] = {}
        self._versions: Dict[str, int] = {}

    def _fresh(self, loaded_at: float) -> bool:
        return self._ttl <= 0 or (self._clock() - loaded_at) < self._ttl

    def get_or_load(self, key: str, loader: Callable[[], List[Any]]) -> List[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry and self._fresh(entry[0]):
                return list(entry[1])
            version = self._versions.get(key, 0)

        rows = list(loader())
        logger.debug("Cache miss for %s, loaded %d row(s)", key, len(rows))

        with self._lock:
            if self._versions.get(key, 0) == version:
                self._entries[key] = (self._clock(), rows)
        return list(rows)

    def invalidate(self, *keys: str) -> None:
        with self._lock:
            for key in keys:
                self._entries.pop(key, None)
                self._versions[key] = self._versions.get(key, 0) + 1
        logger.debug("Invalidated cache keys: %s", ", ".join(keys))

    def clear(self) -> None:
        with self._lock:
            for key in list(self._entries):
                self._versions[key] = self._versions.get(key, 0) + 1
            self._entries.clear()

    def is_cached(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return bool(entry and self._fresh(entry[0]))
