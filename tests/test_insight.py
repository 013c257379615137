"""
Tests for the weather insight message and display units.
"""

import pytest

from runweather.insight import (
    COMFORTABLE_MESSAGE,
    HUMID_MESSAGE,
    WINDY_MESSAGE,
    weather_insight,
)
from runweather.units import celsius_to_fahrenheit, format_temp, format_wind, round_half_up


# Insight rules

def test_small_gap_is_comfortable():
    """A 5°C gap is not enough to mention."""
    assert weather_insight(20.0, 15.0, 2.0, 50.0) == COMFORTABLE_MESSAGE


def test_wind_chill_message():
    assert weather_insight(20.0, 14.0, 2.0, 50.0) == "🌬️ Feels 6°C colder due to wind chill"


def test_humidity_warmer_message():
    assert weather_insight(20.0, 26.0, 2.0, 50.0) == "🥵 Feels 6°C warmer due to humidity"


def test_gap_rounds_half_up():
    """6.5 rounds to 7, not to the nearest even number."""
    assert weather_insight(20.0, 13.5, 0.0, 50.0) == "🌬️ Feels 7°C colder due to wind chill"


def test_gap_wins_over_wind():
    message = weather_insight(5.0, -3.0, 12.0, 50.0)
    assert message == "🌬️ Feels 8°C colder due to wind chill"


def test_windy_message():
    assert weather_insight(10.0, 8.0, 9.0, 50.0) == WINDY_MESSAGE
    assert weather_insight(10.0, 8.0, 8.0, 50.0) == COMFORTABLE_MESSAGE


def test_humid_message_needs_warmth():
    assert weather_insight(22.0, 24.0, 1.0, 85.0) == HUMID_MESSAGE
    assert weather_insight(20.0, 22.0, 1.0, 85.0) == COMFORTABLE_MESSAGE
    assert weather_insight(22.0, 24.0, 1.0, 80.0) == COMFORTABLE_MESSAGE


def test_wind_checked_before_humidity():
    assert weather_insight(25.0, 27.0, 10.0, 95.0) == WINDY_MESSAGE


# Units

@pytest.mark.parametrize(
    "value, expected",
    [(0.4, 0), (0.5, 1), (2.5, 3), (-0.5, 0), (-1.5, -1), (-2.6, -3)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_celsius_to_fahrenheit():
    assert celsius_to_fahrenheit(0.0) == 32.0
    assert celsius_to_fahrenheit(100.0) == 212.0
    assert celsius_to_fahrenheit(-40.0) == -40.0


def test_format_temp():
    assert format_temp(20.0, True) == "68°F"
    assert format_temp(20.0, False) == "20°C"
    assert format_temp(7.0, True) == "45°F"
    assert format_temp(2.5, False) == "3°C"


def test_format_wind():
    """Wind follows the temperature unit: whole mph or whole m/s."""
    assert format_wind(6.2, True) == "14 mph"
    assert format_wind(6.2, False) == "6 m/s"
    assert format_wind(2.5, False) == "3 m/s"
    assert format_wind(0, True) == "0 mph"


def test_weather_insight_is_idempotent():
    for args in [(20.0, 13.5, 0.0, 50.0), (22.0, 24.0, 1.0, 85.0), (10.0, 8.0, 9.0, 50.0)]:
        assert weather_insight(*args) == weather_insight(*args)
