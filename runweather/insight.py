"""
One-line weather insight.

Rules are checked in order and the first match wins, so exactly one message is
returned.
"""

from runweather.units import round_half_up

FEELS_LIKE_GAP_C = 5.0
WINDY_INSIGHT_MPS = 8.0
HUMID_PCT = 80.0
HUMID_MIN_TEMP_C = 20.0

COMFORTABLE_MESSAGE = "👌 Comfortable conditions for running"
WINDY_MESSAGE = "💨 Windy conditions will increase cooling effect"
HUMID_MESSAGE = "💧 High humidity will make it feel warmer and affect cooling"


def weather_insight(
    temp_c: float,
    feels_like_c: float,
    wind_speed_mps: float,
    humidity_pct: float,
) -> str:
    """
    Summarize how the weather will feel on the run.

    Args:
        temp_c: Ambient temperature in °C
        feels_like_c: Feels-like temperature in °C
        wind_speed_mps: Wind speed in m/s
        humidity_pct: Relative humidity

    Returns:
        A single insight message
    """
    temp_diff = abs(temp_c - feels_like_c)

    if temp_diff > FEELS_LIKE_GAP_C:
        if feels_like_c < temp_c:
            return f"🌬️ Feels {round_half_up(temp_diff)}°C colder due to wind chill"
        return f"🥵 Feels {round_half_up(temp_diff)}°C warmer due to humidity"

    if wind_speed_mps > WINDY_INSIGHT_MPS:
        return WINDY_MESSAGE

    if humidity_pct > HUMID_PCT and temp_c > HUMID_MIN_TEMP_C:
        return HUMID_MESSAGE

    return COMFORTABLE_MESSAGE
