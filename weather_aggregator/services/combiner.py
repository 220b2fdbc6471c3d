from weather_aggregator.models import (
    Astro,
    AstronomyPayload,
    Condition,
    CurrentConditions,
    CurrentPayload,
    PlaceInfo,
    UpstreamErr,
    UpstreamResult,
    WeatherReport,
)
from weather_aggregator.services.location import AUTO_IP


def format_location_name(query: str) -> str:
    return "Your Location" if query == AUTO_IP else query


def combine(current: UpstreamResult, astronomy: UpstreamResult, original_query: str) -> WeatherReport:
    """Merge the current-conditions and astronomy results into one report.

    A failure on either side fails the whole report, reporting the
    current-conditions error first. Fields missing from a successful payload
    are left unset.
    """
    if isinstance(current, UpstreamErr) or isinstance(astronomy, UpstreamErr):
        error = current.message if isinstance(current, UpstreamErr) else astronomy.message
        return WeatherReport(
            location=format_location_name(original_query),
            success=False,
            error=error,
        )

    weather: CurrentPayload = current.payload
    astro_payload: AstronomyPayload = astronomy.payload

    place = weather.location or PlaceInfo()
    now = weather.current or CurrentConditions()
    condition = now.condition or Condition()
    astro = (astro_payload.astronomy.astro if astro_payload.astronomy else None) or Astro()

    return WeatherReport(
        location=place.name or format_location_name(original_query),
        temp_c=now.temp_c,
        temp_f=now.temp_f,
        condition=condition.text,
        icon=condition.icon,
        humidity=now.humidity,
        wind_kph=now.wind_kph,
        last_updated=now.last_updated,
        sunrise=astro.sunrise,
        sunset=astro.sunset,
        success=True,
    )
