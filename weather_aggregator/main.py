from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from weather_aggregator.config import settings
from weather_aggregator.logging_config import setup_logging
from weather_aggregator.models import RefreshResponse, WeatherResponse
from weather_aggregator.services.cache import build_cache
from weather_aggregator.services.weather import WeatherService
from weather_aggregator.services.weatherapi import WeatherApiClient

logger = setup_logging(settings.log_level)

app = FastAPI(title=settings.app_name)

cache = build_cache(settings)
weatherapi = WeatherApiClient(
    settings.weatherapi_base_url,
    settings.api_key,
    timeout_seconds=settings.weatherapi_timeout_seconds,
)
service = WeatherService(
    weatherapi,
    cache,
    default_location=settings.default_location,
    ttl_seconds=settings.cache_ttl_seconds,
)

if settings.api_key is None:
    logger.warning("WEATHERAPI_KEY is not configured; weather lookups will report an error")


@app.get("/health")
def health():
    return {"status": "ok", "service": settings.app_name}


@app.get("/")
def root():
    return JSONResponse({"service": settings.app_name, "docs": "/docs"})


def _client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


@app.get("/weather", response_model=WeatherResponse, response_model_exclude_none=True)
async def weather(
    request: Request,
    location: Optional[str] = Query(None, description="Place name, e.g. 'London'; omit to use your IP"),
):
    manual_search = bool(location and location.strip())
    user_ip = _client_ip(request)
    logger.info("Weather request from IP: %s", user_ip)

    report = await service.get_weather(location if manual_search else user_ip)
    title = f"Weather in {report.location}" if report.success else "Weather Info"
    return WeatherResponse(**report.model_dump(), manual_search=manual_search, title=title)


@app.post("/weather/refresh", response_model=RefreshResponse)
def refresh(
    request: Request,
    location: Optional[str] = Query(None),
    clear_all: bool = Query(False),
):
    cleared = service.clear(location=location, origin=_client_ip(request), clear_all=clear_all)
    notice = "All weather cache cleared successfully!" if clear_all else "Weather data refreshed!"
    return RefreshResponse(notice=notice, cleared=cleared)
