"""Temperature and wind display helpers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity."""
    return math.floor(value + 0.5)


def celsius_to_fahrenheit(temp_c: float) -> float:
    return temp_c * 9 / 5 + 32


def convert_temp(temp_c: float, use_fahrenheit: bool) -> float:
    """Convert a °C value to the display unit."""
    return celsius_to_fahrenheit(temp_c) if use_fahrenheit else temp_c


def format_temp(temp_c: float, use_fahrenheit: bool) -> str:
    """
    Format a °C value for display, e.g. ``"68°F"`` or ``"20°C"``.

    Args:
        temp_c: Temperature in °C
        use_fahrenheit: Display in °F instead of °C

    Returns:
        Rounded temperature with unit suffix
    """
    unit = "°F" if use_fahrenheit else "°C"
    return f"{round_half_up(convert_temp(temp_c, use_fahrenheit))}{unit}"


MPS_TO_MPH = 2.237


def format_wind(speed_mps: float, use_fahrenheit: bool) -> str:
    """Format wind speed as whole mph (imperial display) or m/s."""
    if use_fahrenheit:
        return f"{round_half_up(speed_mps * MPS_TO_MPH)} mph"
    return f"{round_half_up(speed_mps)} m/s"
