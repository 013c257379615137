"""
Adapters from provider payloads to engine inputs.

The caller performs the HTTP requests; these functions only interpret the JSON
that OpenWeather's current-weather and geocoding endpoints return.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError, computed_field

from runweather.errors import LocationUnavailable, WeatherFetchFailed
from runweather.schemas import WeatherObservation

log = logging.getLogger("runweather.observation")

MIN_CITY_QUERY_LENGTH = 2


class CityOption(BaseModel):
    """A geocoding match the runner can pick."""

    name: str
    state: Optional[str] = None
    country: str
    lat: float
    lon: float

    @computed_field
    @property
    def display(self) -> str:
        if self.state:
            return f"{self.name}, {self.state}, {self.country}"
        return f"{self.name}, {self.country}"


def is_night_at(now: float, sunrise: float, sunset: float) -> bool:
    """Whether a unix timestamp falls before sunrise or after sunset."""
    return now < sunrise or now > sunset


def observation_from_openweather(
    payload: Dict[str, Any],
    now: Optional[float] = None,
    uv_index: float = 0.0,
) -> WeatherObservation:
    """
    Build a WeatherObservation from an OpenWeather current-weather payload.

    The payload must have been requested with ``units=metric``.

    Args:
        payload: Decoded JSON body
        now: Unix time used for the day/night decision (defaults to now)
        uv_index: UV index from a separate source (0 when unknown)

    Returns:
        WeatherObservation

    Raises:
        WeatherFetchFailed: If the payload is an error response or malformed
    """
    if not isinstance(payload, dict):
        raise WeatherFetchFailed("Weather payload is not a JSON object")

    cod = payload.get("cod", 200)
    if str(cod) != "200":
        message = payload.get("message") or "Failed to fetch weather"
        log.warning("Weather provider error %s: %s", cod, message)
        raise WeatherFetchFailed(str(message))

    if now is None:
        now = time.time()

    try:
        main = payload["main"]
        condition = payload["weather"][0]
        sun = payload["sys"]
        observation = WeatherObservation(
            temperature_c=main["temp"],
            feels_like_c=main["feels_like"],
            humidity_pct=main["humidity"],
            condition_main=condition["main"],
            description=condition.get("description"),
            wind_speed_mps=payload["wind"]["speed"],
            is_night=is_night_at(now, float(sun["sunrise"]), float(sun["sunset"])),
            uv_index=payload.get("uvi", uv_index) or 0.0,
            location_name=payload.get("name"),
        )
    except (KeyError, IndexError, TypeError, ValueError, ValidationError) as e:
        log.warning("Could not parse weather payload: %s", e)
        raise WeatherFetchFailed(f"Could not parse weather payload: {e}")

    log.debug(
        "Parsed observation for %s: %.1f°C (feels %.1f°C), %s",
        observation.location_name, observation.temperature_c,
        observation.feels_like_c, observation.condition_main,
    )
    return observation


def is_searchable_query(query: str) -> bool:
    """City search is skipped for queries shorter than two characters."""
    return len(query.strip()) >= MIN_CITY_QUERY_LENGTH


def parse_city_options(payload: List[Dict[str, Any]]) -> List[CityOption]:
    """
    Turn a geocoding response into selectable city options.

    Args:
        payload: Decoded JSON array from the geocoding endpoint

    Returns:
        City options in provider order

    Raises:
        LocationUnavailable: If nothing matched
        WeatherFetchFailed: If the payload is malformed
    """
    if not isinstance(payload, list):
        raise WeatherFetchFailed("Geocoding payload is not a JSON array")

    try:
        options = [
            CityOption(
                name=city["name"],
                state=city.get("state"),
                country=city["country"],
                lat=city["lat"],
                lon=city["lon"],
            )
            for city in payload
        ]
    except (KeyError, TypeError, ValidationError) as e:
        raise WeatherFetchFailed(f"Could not parse geocoding payload: {e}")

    if not options:
        raise LocationUnavailable("No matching city found")

    return options
