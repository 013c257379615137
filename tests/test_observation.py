"""
Tests for OpenWeather payload adapters.

Covers:
- Current-weather payload parsing and day/night detection
- Provider error responses and malformed payloads
- Geocoding results and the minimum query length
"""

import json
from pathlib import Path

import pytest

from runweather.errors import LocationUnavailable, RunWeatherError, WeatherFetchFailed
from runweather.observation import (
    is_night_at,
    is_searchable_query,
    observation_from_openweather,
    parse_city_options,
)


def load_fixture(name):
    with open(Path("tests/fixtures") / name) as f:
        return json.load(f)


@pytest.fixture
def rain_evening():
    """Boston, light rain, observed after sunset."""
    return load_fixture("openweather_rain_evening.json")


@pytest.fixture
def clear_day():
    """Austin, clear sky, observed mid-day."""
    return load_fixture("openweather_clear_day.json")


# ============================================================================
# Current Weather
# ============================================================================

def test_parse_rain_evening(rain_evening):
    obs = observation_from_openweather(rain_evening, now=rain_evening["dt"])

    assert obs.location_name == "Boston"
    assert obs.temperature_c == 7.0
    assert obs.feels_like_c == 4.2
    assert obs.humidity_pct == 88
    assert obs.condition_main == "Rain"
    assert obs.description == "light rain"
    assert obs.wind_speed_mps == 6.2
    assert obs.is_night is True


def test_parse_clear_day(clear_day):
    obs = observation_from_openweather(clear_day, now=clear_day["dt"])
    assert obs.is_night is False
    assert obs.condition_main == "Clear"
    assert obs.uv_index == 0.0


def test_before_sunrise_is_night(clear_day):
    obs = observation_from_openweather(clear_day, now=clear_day["sys"]["sunrise"] - 60)
    assert obs.is_night is True


def test_is_night_at_boundaries():
    assert is_night_at(100, 100, 200) is False
    assert is_night_at(200, 100, 200) is False
    assert is_night_at(99, 100, 200) is True
    assert is_night_at(201, 100, 200) is True


def test_uv_index_argument_used(clear_day):
    obs = observation_from_openweather(clear_day, now=clear_day["dt"], uv_index=7.0)
    assert obs.uv_index == 7.0


def test_payload_uvi_preferred(clear_day):
    clear_day["uvi"] = 4.5
    obs = observation_from_openweather(clear_day, now=clear_day["dt"], uv_index=7.0)
    assert obs.uv_index == 4.5


def test_error_response_raises():
    """A provider error carries the provider's message."""
    payload = load_fixture("openweather_error.json")

    with pytest.raises(WeatherFetchFailed, match="city not found") as exc_info:
        observation_from_openweather(payload)

    assert exc_info.value.retryable is True
    assert exc_info.value.user_message == "Failed to fetch weather data"


def test_missing_section_raises(rain_evening):
    del rain_evening["main"]
    with pytest.raises(WeatherFetchFailed):
        observation_from_openweather(rain_evening, now=rain_evening["dt"])


def test_empty_weather_list_raises(rain_evening):
    rain_evening["weather"] = []
    with pytest.raises(WeatherFetchFailed):
        observation_from_openweather(rain_evening, now=rain_evening["dt"])


def test_out_of_range_value_raises(rain_evening):
    rain_evening["main"]["humidity"] = 150
    with pytest.raises(WeatherFetchFailed):
        observation_from_openweather(rain_evening, now=rain_evening["dt"])


def test_non_object_payload_raises():
    with pytest.raises(WeatherFetchFailed):
        observation_from_openweather(["not", "an", "object"])


# ============================================================================
# Geocoding
# ============================================================================

def test_city_options_display():
    options = parse_city_options(load_fixture("geocoding_portland.json"))

    assert [o.display for o in options] == [
        "Portland, Oregon, US",
        "Portland, Maine, US",
        "Portland, AU",
    ]
    assert options[0].lat == pytest.approx(45.5152)


def test_city_option_serializes_display():
    option = parse_city_options(load_fixture("geocoding_portland.json"))[2]
    assert option.model_dump()["display"] == "Portland, AU"


def test_no_matches_is_location_unavailable():
    with pytest.raises(LocationUnavailable) as exc_info:
        parse_city_options([])

    assert isinstance(exc_info.value, RunWeatherError)
    assert exc_info.value.retryable is True
    assert "location services" in exc_info.value.user_message


def test_malformed_geocoding_raises():
    with pytest.raises(WeatherFetchFailed):
        parse_city_options([{"name": "Nowhere"}])
    with pytest.raises(WeatherFetchFailed):
        parse_city_options({"name": "Nowhere"})


@pytest.mark.parametrize(
    "query, expected",
    [("", False), ("a", False), (" b ", False), ("bo", True), ("Boston", True)],
)
def test_searchable_query(query, expected):
    assert is_searchable_query(query) is expected
