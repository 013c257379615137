"""
Derived weather condition flags.

The clothing table and the gear filter branch on the same thresholds; they are
defined once here so the two can never disagree.
"""

from typing import Set

from runweather.schemas import ConditionTag

WINDY_THRESHOLD_MPS = 5.0
COLD_THRESHOLD_C = 10.0
VERY_COLD_THRESHOLD_C = 0.0


def condition_contains(condition_main: str, token: str) -> bool:
    """
    Case-insensitive substring match against a provider condition string.

    Any string containing the token matches, so "light rain showers" counts
    as rain.
    """
    return token in condition_main.lower()


def is_rainy(condition_main: str) -> bool:
    return condition_contains(condition_main, "rain")


def is_snowy(condition_main: str) -> bool:
    return condition_contains(condition_main, "snow")


def is_cloudy(condition_main: str) -> bool:
    return condition_contains(condition_main, "cloud")


def is_windy(wind_speed_mps: float) -> bool:
    return wind_speed_mps > WINDY_THRESHOLD_MPS


def derive_condition_tags(
    effective_temp_c: float,
    condition_main: str,
    wind_speed_mps: float,
    is_night: bool,
) -> Set[ConditionTag]:
    """
    Compute the condition tags that apply to an observation.

    Args:
        effective_temp_c: Feels-like temperature in °C
        condition_main: Provider weather category
        wind_speed_mps: Wind speed in m/s
        is_night: Whether it is dark outside

    Returns:
        Set of applicable tags (never contains ConditionTag.ANY)
    """
    tags = set()

    if effective_temp_c <= VERY_COLD_THRESHOLD_C:
        tags.add(ConditionTag.VERY_COLD)
    if effective_temp_c <= COLD_THRESHOLD_C:
        tags.add(ConditionTag.COLD)
    if is_windy(wind_speed_mps):
        tags.add(ConditionTag.WINDY)
    if is_rainy(condition_main):
        tags.add(ConditionTag.RAIN)
    if is_night:
        tags.add(ConditionTag.NIGHT)

    return tags
