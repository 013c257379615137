"""
Pydantic models for the running weather recommender.

This module defines the core data structures for:
- Weather Observations: Already-resolved current conditions for a location
- Recommendations: Clothing layers, gear catalog entries and checklist items
- User Preferences: The small set of settings persisted between sessions
- Run Reports: Everything the engine produces for one observation
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ============================================================================
# Enumerations
# ============================================================================

class RunType(str, Enum):
    """Kind of run being planned."""
    EASY = "easy"
    LONG = "long"
    WORKOUT = "workout"
    RECOVERY = "recovery"

    @property
    def display_name(self) -> str:
        return RUN_TYPE_NAMES[self]


RUN_TYPE_NAMES = {
    RunType.EASY: "Easy Run",
    RunType.LONG: "Long Run",
    RunType.WORKOUT: "Workout",
    RunType.RECOVERY: "Recovery",
}


class ChecklistCategory(str, Enum):
    """Grouping used when displaying checklist items."""
    SAFETY = "safety"
    COMFORT = "comfort"
    PERFORMANCE = "performance"
    WEATHER = "weather"


class Priority(str, Enum):
    """Checklist item importance."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return PRIORITY_RANK[self]


PRIORITY_RANK = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}


class ConditionTag(str, Enum):
    """Applicability tags for gear catalog entries."""
    ANY = "any"
    COLD = "cold"
    VERY_COLD = "very-cold"
    WINDY = "windy"
    RAIN = "rain"
    NIGHT = "night"


# ============================================================================
# Weather Observation
# ============================================================================

class WeatherObservation(BaseModel):
    """
    Current conditions for one location, in metric units.

    Supplied by a caller that already resolved it from a weather provider.
    The recommendation functions never compute meteorology themselves.
    """

    model_config = ConfigDict(frozen=True)

    temperature_c: float = Field(
        ...,
        description="Ambient air temperature in °C"
    )

    feels_like_c: float = Field(
        ...,
        description="Apparent (feels-like) temperature in °C"
    )

    humidity_pct: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Relative humidity percentage"
    )

    condition_main: str = Field(
        ...,
        description="Provider weather category (e.g., 'Rain', 'Clear', 'Clouds')"
    )

    wind_speed_mps: float = Field(
        ...,
        ge=0.0,
        description="Wind speed in metres per second"
    )

    is_night: bool = Field(
        default=False,
        description="Whether the observation time falls outside sunrise-sunset"
    )

    uv_index: float = Field(
        default=0.0,
        ge=0.0,
        description="UV index (0 when unknown)"
    )

    location_name: Optional[str] = Field(
        default=None,
        description="Display name of the observed location"
    )

    description: Optional[str] = Field(
        default=None,
        description="Longer provider description (e.g., 'light rain')"
    )

    @property
    def effective_temp_c(self) -> float:
        """Temperature used for every clothing decision."""
        return self.feels_like_c


# ============================================================================
# Recommendations
# ============================================================================

class ClothingRecommendation(BaseModel):
    """Ordered clothing suggestions, most important first within each list."""

    top: List[str] = Field(default_factory=list, description="Upper-body layers")
    bottom: List[str] = Field(default_factory=list, description="Lower-body layers")
    accessories: List[str] = Field(
        default_factory=list, description="Hats, gloves, visibility gear"
    )
    footwear: List[str] = Field(default_factory=list, description="Shoes and socks")


class ChecklistItem(BaseModel):
    """A single pre-run checklist entry."""

    id: str = Field(..., description="Stable identifier, unique within a checklist")
    text: str = Field(..., description="What to do")
    category: ChecklistCategory = Field(..., description="Display grouping")
    priority: Priority = Field(..., description="Importance used for ordering")
    completed: bool = Field(default=False, description="Whether the runner ticked it off")


class ChecklistProgress(BaseModel):
    """Completion summary for a checklist."""

    completed: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    high_priority_incomplete: int = Field(..., ge=0)
    all_complete: bool


class Retailer(BaseModel):
    """Where a gear item can be bought."""

    name: str
    link: str
    price: Optional[str] = None


class GearRecommendation(BaseModel):
    """Curated gear catalog entry."""

    id: str = Field(..., description="Catalog identifier")
    name: str = Field(..., description="Product name")
    brand: str = Field(..., description="Manufacturer")
    price: str = Field(..., description="List price as displayed")
    image: Optional[str] = Field(default=None, description="Product image URL")
    description: str = Field(..., description="One-line product pitch")
    conditions: List[ConditionTag] = Field(
        ...,
        min_length=1,
        description="Conditions under which this item is worth suggesting"
    )
    retailers: List[Retailer] = Field(default_factory=list)
    sponsored: bool = Field(default=False)


# ============================================================================
# User Preferences
# ============================================================================

MAX_FAVORITE_CITIES = 5


class UserPreferences(BaseModel):
    """
    Settings persisted between sessions.

    Serialized with camelCase keys so records written by earlier versions of
    the app keep loading.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    use_fahrenheit: bool = Field(
        default=True,
        description="Display temperatures in °F instead of °C"
    )

    dark_mode: bool = Field(default=False, description="Dark colour scheme")

    favorite_run_type: RunType = Field(
        default=RunType.EASY,
        description="Run type selected on start-up"
    )

    favorite_cities: List[str] = Field(
        default_factory=list,
        max_length=MAX_FAVORITE_CITIES,
        description="Recently used cities, most recent first"
    )

    completed_checklist_items: List[str] = Field(
        default_factory=list,
        description="Checklist item ids the runner has ticked off"
    )

    @field_validator("favorite_cities", mode="before")
    @classmethod
    def keep_recent_cities(cls, values: Any) -> Any:
        """Deduplicate, then keep the newest cities (the list is most recent first)."""
        if not isinstance(values, (list, tuple)):
            return values
        return _unique(values)[:MAX_FAVORITE_CITIES]

    @field_validator("completed_checklist_items", mode="before")
    @classmethod
    def deduplicate(cls, values: Any) -> Any:
        if not isinstance(values, (list, tuple)):
            return values
        return _unique(values)


def _unique(values) -> list:
    """Drop repeated entries, keeping the first occurrence."""
    unique = []
    for value in values:
        if value not in unique:
            unique.append(value)
    return unique


# ============================================================================
# Run Report
# ============================================================================

class RunReport(BaseModel):
    """
    Everything produced for one observation and run type.

    The caller owns a single report and rebuilds it on every state change
    (new observation, new run type, checklist toggle).
    """

    generated_at: datetime = Field(
        default_factory=datetime.now,
        description="When this report was built"
    )

    observation: WeatherObservation
    run_type: RunType
    clothing: ClothingRecommendation
    gear: List[GearRecommendation] = Field(default_factory=list)
    checklist: List[ChecklistItem] = Field(default_factory=list)
    progress: ChecklistProgress
    insight: str
