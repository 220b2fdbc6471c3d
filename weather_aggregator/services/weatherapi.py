import logging
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import ValidationError

from weather_aggregator.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamStatusError,
    UpstreamTransportError,
    WeatherServiceError,
)
from weather_aggregator.models import (
    AstronomyPayload,
    CurrentPayload,
    Payload,
    UpstreamErr,
    UpstreamOk,
    UpstreamResult,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Payload)


class WeatherApiClient:
    """Client for the weatherapi.com current-conditions and astronomy endpoints.

    Every call returns an ``UpstreamResult``; failures are never raised.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str],
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout_seconds
        self._transport = transport

    async def get_current(self, query: str) -> UpstreamResult:
        return await self._fetch("current.json", query, CurrentPayload)

    async def get_astronomy(self, query: str) -> UpstreamResult:
        return await self._fetch("astronomy.json", query, AstronomyPayload)

    async def _fetch(self, endpoint: str, query: str, model: Type[P]) -> UpstreamResult:
        try:
            data = await self._request_json(endpoint, query)
            try:
                payload = model.model_validate(data)
            except ValidationError as exc:
                raise MalformedResponseError() from exc
        except WeatherServiceError as exc:
            logger.warning("weatherapi %s failed for %r: %s", endpoint, query, exc)
            return UpstreamErr(str(exc))
        except Exception as exc:
            logger.exception("weatherapi %s raised unexpectedly for %r", endpoint, query)
            return UpstreamErr(f"Unexpected error: {exc}")
        return UpstreamOk(payload)

    async def _request_json(self, endpoint: str, query: str) -> Dict[str, Any]:
        if not self.api_key:
            raise ConfigurationError()

        url = f"{self.base_url}/{endpoint}"
        params = {"key": self.api_key, "q": query}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.get(url, params=params)
        except httpx.TransportError as exc:
            raise UpstreamTransportError() from exc

        if not r.is_success:
            raise UpstreamStatusError(r.status_code)

        try:
            data = r.json()
        except ValueError as exc:
            raise MalformedResponseError() from exc
        if not isinstance(data, dict):
            raise MalformedResponseError()
        return data
