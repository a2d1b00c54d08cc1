"""
Process-wide cache of dashboard payloads.

Entries are keyed by the request path plus its query string, e.g.
``/dashboard/invoices?query=&page=1``. ``revalidate_path`` drops every
entry whose path matches, so the next read goes back to the database.
The cache holds at most ``max_entries`` payloads and evicts the least
recently used one when full.
"""
import logging
import os
import threading
from collections import OrderedDict
from typing import Any, Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

PAGE_CACHE_MAX_ENTRIES = int(os.getenv("PAGE_CACHE_MAX_ENTRIES", "256"))


def cache_key(path: str, query_string: str = "") -> str:
    return f"{path}?{query_string}" if query_string else path


class PageCache:
    """Thread-safe, size-bounded LRU mapping of cache keys to cached payloads"""

    def __init__(self, max_entries: int = PAGE_CACHE_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: "OrderedDict[str, Any]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            if key not in self._entries:
                return None
            self._entries.move_to_end(key)
            return self._entries[key]

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted {evicted} from page cache")

    def revalidate_path(self, path: str) -> int:
        """
        Mark everything cached for a path as stale

        Args:
            path: Route path without query string, e.g. "/dashboard/invoices"

        Returns:
            Number of entries dropped
        """
        with self._lock:
            stale = [key for key in self._entries if urlsplit(key).path == path]
            for key in stale:
                del self._entries[key]
        logger.debug(f"Revalidated {path}: dropped {len(stale)} cached entries")
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


page_cache = PageCache()


def revalidate_path(path: str) -> int:
    return page_cache.revalidate_path(path)
