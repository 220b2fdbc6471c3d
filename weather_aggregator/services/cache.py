import fnmatch
import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

import redis
from pydantic import ValidationError

from weather_aggregator.config import Settings
from weather_aggregator.models import WeatherReport

logger = logging.getLogger(__name__)

KEY_PREFIX = "weather:"


def cache_key(query: str) -> str:
    if not query or not query.strip():
        raise ValueError("location query must not be empty")
    return f"{KEY_PREFIX}{query}"


class WeatherCache(Protocol):
    def read(self, key: str) -> Optional[WeatherReport]: ...

    def write(self, key: str, report: WeatherReport, ttl_seconds: int) -> None: ...

    def delete(self, key: str) -> int: ...

    def delete_matching(self, pattern: str) -> int: ...


class RedisCache:
    """
    Stores the report as JSON with metadata:
      key -> {"stored_at": <unix>, "payload": {...}}
    Expiry is left to Redis (SETEX).
    """

    def __init__(self, redis_url: str):
        self.client = redis.from_url(redis_url, decode_responses=True)

    def read(self, key: str) -> Optional[WeatherReport]:
        raw = self.client.get(key)
        if not raw:
            return None

        try:
            obj = json.loads(raw)
            return WeatherReport.model_validate(obj["payload"])
        except (ValueError, KeyError, TypeError, ValidationError):
            logger.warning("Discarding unreadable cache entry %s", key)
            return None

    def write(self, key: str, report: WeatherReport, ttl_seconds: int) -> None:
        obj = {"stored_at": int(time.time()), "payload": report.model_dump(mode="json")}
        self.client.setex(key, ttl_seconds, json.dumps(obj))

    def delete(self, key: str) -> int:
        return int(self.client.delete(key))

    def delete_matching(self, pattern: str) -> int:
        keys = list(self.client.scan_iter(match=pattern))
        if not keys:
            return 0
        return int(self.client.delete(*keys))


@dataclass(frozen=True)
class CacheEntry:
    key: str
    value: WeatherReport
    expires_at: float


class InMemoryCache:
    """Process-local cache with lazy expiry; ``clock`` is injectable for tests."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def read(self, key: str) -> Optional[WeatherReport]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() > entry.expires_at:
                del self._entries[key]
                return None
            return entry.value

    def write(self, key: str, report: WeatherReport, ttl_seconds: int) -> None:
        now = self._clock()
        entry = CacheEntry(key=key, value=report, expires_at=now + ttl_seconds)
        with self._lock:
            # Entries for keys that are never read again are dropped here.
            expired = [k for k, e in self._entries.items() if now > e.expires_at]
            for k in expired:
                del self._entries[k]
            self._entries[key] = entry

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def delete(self, key: str) -> int:
        with self._lock:
            return 1 if self._entries.pop(key, None) is not None else 0

    def delete_matching(self, pattern: str) -> int:
        with self._lock:
            doomed = [k for k in self._entries if fnmatch.fnmatchcase(k, pattern)]
            for k in doomed:
                del self._entries[k]
        return len(doomed)


def build_cache(settings: Settings) -> WeatherCache:
    if settings.cache_backend == "memory":
        return InMemoryCache()
    return RedisCache(settings.redis_url)
