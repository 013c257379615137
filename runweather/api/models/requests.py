"""
API Request Models

Pydantic models for API request validation.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from runweather.schemas import RunType, WeatherObservation


class ObservationRequest(BaseModel):
    """Request carrying a single observation."""

    observation: WeatherObservation = Field(..., description="Current conditions")


class RecommendationRequest(ObservationRequest):
    """Request model for a full run report."""

    run_type: Optional[RunType] = Field(
        None, description="Run type (defaults to the stored favorite)"
    )
    apply_saved_progress: bool = Field(
        True, description="Re-apply stored checklist completion"
    )


class ClothingRequest(ObservationRequest):
    """Request model for clothing recommendations."""

    run_type: RunType = Field(RunType.EASY, description="Run type")


class ChecklistRequest(ObservationRequest):
    """Request model for checklist generation."""

    run_type: RunType = Field(RunType.EASY, description="Run type")
    completed_items: List[str] = Field(
        default_factory=list, description="Checklist ids already ticked off"
    )


class OpenWeatherRequest(BaseModel):
    """Request model for a report built from a raw OpenWeather payload."""

    payload: Dict[str, Any] = Field(
        ..., description="OpenWeather current-weather response (units=metric)"
    )
    run_type: Optional[RunType] = Field(None, description="Run type")
    now: Optional[float] = Field(
        None, description="Unix time for the day/night decision (defaults to server time)"
    )
    uv_index: float = Field(0.0, ge=0.0, description="UV index when the payload has none")


class LocationRequest(BaseModel):
    """Request model for turning geocoding results into city options."""

    query: str = Field(..., description="What the runner typed")
    results: List[Dict[str, Any]] = Field(
        default_factory=list, description="Geocoding API response array"
    )


class PreferencesUpdate(BaseModel):
    """Partial preference update; omitted fields are left unchanged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    use_fahrenheit: Optional[bool] = None
    dark_mode: Optional[bool] = None
    favorite_run_type: Optional[RunType] = None
    completed_checklist_items: Optional[List[str]] = None


class FavoriteCityRequest(BaseModel):
    """Request model for adding a favorite city."""

    city: str = Field(..., min_length=1, description="City display name")
