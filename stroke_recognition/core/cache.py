"""
Caller-owned memo of validation results.
"""

import logging
import time
from typing import Callable, Dict, Optional, Tuple

from ..config.settings import StrokeConfig
from ..strokes.patterns import ValidationResult

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, int]


class ValidationCache:
    """
    Stores ValidationResult objects keyed by (character, stroke_index).

    The cache belongs to whoever creates it (a practice session, a UI
    screen); the engine never keeps one itself. Entries expire after
    ``ttl_seconds`` and the oldest entry is evicted when the cache is full.
    """

    def __init__(self, max_size: int = None, ttl_seconds: float = None,
                 clock: Callable[[], float] = time.time):
        config = StrokeConfig()
        self.max_size = max_size if max_size is not None else config.CACHE_MAX_SIZE
        self.ttl = ttl_seconds if ttl_seconds is not None else config.CACHE_TTL_SECONDS
        self.clock = clock
        self._entries: Dict[CacheKey, Tuple[ValidationResult, float]] = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        return self.get(*key) is not None

    def get(self, character: str, stroke_index: int) -> Optional[ValidationResult]:
        """Cached result, or None when missing or expired."""
        key = (character, stroke_index)
        entry = self._entries.get(key)
        if entry is None:
            return None

        result, stored_at = entry
        if self.clock() - stored_at > self.ttl:
            del self._entries[key]
            return None
        return result

    def put(self, character: str, stroke_index: int, result: ValidationResult) -> None:
        """Store a result, evicting the oldest entry if the cache is full."""
        key = (character, stroke_index)
        if key not in self._entries and len(self._entries) >= self.max_size:
            oldest = min(self._entries, key=lambda k: self._entries[k][1])
            del self._entries[oldest]
            logger.debug("Evicted cached validation %s", oldest)
        self._entries[key] = (result, self.clock())

    def invalidate(self, character: str, stroke_index: int = None) -> None:
        """Drop one entry, or every entry of a character when no index is given."""
        if stroke_index is not None:
            self._entries.pop((character, stroke_index), None)
            return
        for key in [k for k in self._entries if k[0] == character]:
            del self._entries[key]

    def cleanup(self) -> int:
        """Remove expired entries; returns how many were removed."""
        now = self.clock()
        expired = [k for k, (_, stored_at) in self._entries.items() if now - stored_at > self.ttl]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()
