import asyncio
import logging
from typing import Optional

from weather_aggregator.models import WeatherReport
from weather_aggregator.services.cache import KEY_PREFIX, WeatherCache, cache_key
from weather_aggregator.services.combiner import combine
from weather_aggregator.services.location import resolve
from weather_aggregator.services.weatherapi import WeatherApiClient

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 15 * 60


class WeatherService:
    """Resolves a location, serves it from cache or fetches and merges both upstream results."""

    def __init__(
        self,
        client: WeatherApiClient,
        cache: WeatherCache,
        default_location: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ):
        self.client = client
        self.cache = cache
        self.default_location = default_location
        self.ttl_seconds = ttl_seconds

    async def get_weather(self, raw_input: Optional[str]) -> WeatherReport:
        query = resolve(raw_input, self.default_location)
        key = cache_key(query)

        cached = self.cache.read(key)
        if cached is not None:
            logger.info("Cache hit for %s", key)
            return cached

        logger.info("Cache miss for %s; fetching upstream", key)
        current, astronomy = await asyncio.gather(
            self.client.get_current(query),
            self.client.get_astronomy(query),
        )
        report = combine(current, astronomy, query)

        # Failures are cached too so an outage is not re-polled inside the window.
        self.cache.write(key, report, ttl_seconds=self.ttl_seconds)
        return report

    def clear(
        self,
        location: Optional[str] = None,
        origin: Optional[str] = None,
        clear_all: bool = False,
    ) -> int:
        if clear_all:
            removed = self.cache.delete_matching(f"{KEY_PREFIX}*")
            logger.info("Cleared %d weather cache entries", removed)
            return removed

        raw = location if location and location.strip() else origin
        key = cache_key(resolve(raw, self.default_location))
        removed = self.cache.delete(key)
        logger.info("Cleared %s (%d removed)", key, removed)
        return removed
