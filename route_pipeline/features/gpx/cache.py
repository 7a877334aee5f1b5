"""
Route cache.

Explicit, caller-owned cache of processed uploads keyed by content hash.
Not thread-safe; share one instance across threads only behind a lock.
"""

import hashlib
import logging
from collections import OrderedDict
from typing import Optional, Sequence

from route_pipeline.config import settings

from .schemas import SimplifiedRouteSet

logger = logging.getLogger(__name__)


def compute_content_hash(content: str) -> str:
    """SHA-256 hex digest of the UTF-8 encoded GPX text."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


class RouteCache:
    """
    LRU map of processed routes.

    Entries are copied on put and on get, so callers may edit a returned
    SimplifiedRouteSet without touching the stored one.

    Usage:
        cache = RouteCache(max_entries=32)
        processor = RouteProcessor(cache=cache)
    """

    def __init__(self, max_entries: Optional[int] = None):
        self.max_entries = max_entries if max_entries is not None else settings.cache_max_entries
        if self.max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._entries: "OrderedDict[str, SimplifiedRouteSet]" = OrderedDict()

    @staticmethod
    def make_key(
        content: str,
        filename: Optional[str] = None,
        options: Sequence = (),
    ) -> str:
        """
        Content hash plus everything else that shapes the result.

        Args:
            content: Raw GPX text
            filename: Feeds the route name fallback
            options: Processor settings (point targets, default name)
        """
        variant = repr((filename or "", *options))
        return f"{compute_content_hash(content)}:{compute_content_hash(variant)}"

    def get(self, key: str) -> Optional[SimplifiedRouteSet]:
        result = self._entries.get(key)
        if result is None:
            return None
        self._entries.move_to_end(key)
        return result.model_copy(deep=True)

    def put(self, key: str, value: SimplifiedRouteSet) -> None:
        self._entries[key] = value.model_copy(deep=True)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cached route {evicted[:12]}")

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
