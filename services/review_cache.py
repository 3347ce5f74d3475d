import time
import logging
from typing import Callable, Dict, List, Optional

from models.review import Review

logger = logging.getLogger(__name__)

CACHE_TTL_MS = 24 * 60 * 60 * 1000  # 24 hours


def _now_ms() -> int:
    return int(time.time() * 1000)


class ReviewCache:
    """
    Generated reviews keyed by "company:role" (lowercased, not otherwise
    normalized). Expiry is checked lazily on get; nothing sweeps the map.
    """

    def __init__(self, ttl_ms: int = CACHE_TTL_MS, clock: Callable[[], int] = None):
        self.ttl_ms = ttl_ms
        self._clock = clock or _now_ms
        self._entries: Dict[str, dict] = {}

    @staticmethod
    def cache_key(company: str, role: str) -> str:
        return f"{company.lower()}:{role.lower()}"

    def get(self, company: str, role: str) -> Optional[List[Review]]:
        key = self.cache_key(company, role)
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._clock() - entry["timestamp"] < self.ttl_ms:
            logger.debug(f"Cache hit for: {key}")
            return entry["data"]

        logger.debug(f"Cache entry expired for: {key}")
        del self._entries[key]
        return None

    def put(self, company: str, role: str, reviews: List[Review]) -> None:
        key = self.cache_key(company, role)
        self._entries[key] = {"data": list(reviews), "timestamp": self._clock()}
        logger.debug(f"Cached {len(reviews)} reviews with key: {key}")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries
