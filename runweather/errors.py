"""
Errors raised at the boundary between weather providers and the engine.

The recommendation functions themselves never raise for well-typed input;
these cover the two ways resolving an observation can fail. Both are shown to
the runner as a message they can retry.
"""


class RunWeatherError(Exception):
    """Base class for runweather errors."""

    retryable = False
    user_message = "Something went wrong"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.user_message)
        self.detail = detail or self.user_message


class LocationUnavailable(RunWeatherError):
    """Location could not be determined (geolocation denied or no geocoding match)."""

    retryable = True
    user_message = "Please enable location services or enter a city name"


class WeatherFetchFailed(RunWeatherError):
    """Weather provider returned an error or a payload that could not be parsed."""

    retryable = True
    user_message = "Failed to fetch weather data"
