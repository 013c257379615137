"""
Tests for Pydantic schemas.

Covers:
- WeatherObservation field ranges and immutability
- Enumerations and their display helpers
- UserPreferences defaults, aliases and list rules
- Run report serialization
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from runweather.schemas import (
    ChecklistItem,
    ChecklistCategory,
    MAX_FAVORITE_CITIES,
    Priority,
    RunType,
    UserPreferences,
    WeatherObservation,
)


@pytest.fixture
def cold_wind_observation():
    """Load a windy, below-freezing feels-like observation."""
    with open(Path("tests/fixtures/observation_cold_wind.json")) as f:
        return WeatherObservation(**json.load(f))


# ============================================================================
# Weather Observation
# ============================================================================

def test_observation_loads_from_file(cold_wind_observation):
    assert cold_wind_observation.location_name == "Chicago"
    assert cold_wind_observation.condition_main == "Clouds"
    assert cold_wind_observation.uv_index == 1.0


def test_effective_temp_is_feels_like(cold_wind_observation):
    """All clothing decisions use the feels-like value."""
    assert cold_wind_observation.effective_temp_c == -3.0
    assert cold_wind_observation.effective_temp_c != cold_wind_observation.temperature_c


def test_observation_optional_fields_default():
    obs = WeatherObservation(
        temperature_c=10.0,
        feels_like_c=9.0,
        humidity_pct=50.0,
        condition_main="Clear",
        wind_speed_mps=1.0,
    )
    assert obs.is_night is False
    assert obs.uv_index == 0.0
    assert obs.location_name is None


@pytest.mark.parametrize("humidity", [-1.0, 100.5])
def test_humidity_range(humidity):
    with pytest.raises(ValidationError):
        WeatherObservation(
            temperature_c=10.0,
            feels_like_c=10.0,
            humidity_pct=humidity,
            condition_main="Clear",
            wind_speed_mps=1.0,
        )


def test_negative_wind_rejected():
    with pytest.raises(ValidationError):
        WeatherObservation(
            temperature_c=10.0,
            feels_like_c=10.0,
            humidity_pct=50.0,
            condition_main="Clear",
            wind_speed_mps=-0.1,
        )


def test_observation_is_immutable(cold_wind_observation):
    with pytest.raises(ValidationError):
        cold_wind_observation.temperature_c = 30.0


# ============================================================================
# Enumerations
# ============================================================================

def test_run_type_values_and_names():
    assert [rt.value for rt in RunType] == ["easy", "long", "workout", "recovery"]
    assert RunType.EASY.display_name == "Easy Run"
    assert RunType.LONG.display_name == "Long Run"
    assert RunType.WORKOUT.display_name == "Workout"
    assert RunType.RECOVERY.display_name == "Recovery"


def test_priority_rank_order():
    assert Priority.HIGH.rank < Priority.MEDIUM.rank < Priority.LOW.rank


def test_checklist_item_defaults_incomplete():
    item = ChecklistItem(
        id="route",
        text="Route planned",
        category=ChecklistCategory.PERFORMANCE,
        priority="medium",
    )
    assert item.completed is False
    assert item.priority == Priority.MEDIUM


# ============================================================================
# User Preferences
# ============================================================================

def test_preference_defaults():
    prefs = UserPreferences()
    assert prefs.use_fahrenheit is True
    assert prefs.dark_mode is False
    assert prefs.favorite_run_type == RunType.EASY
    assert prefs.favorite_cities == []
    assert prefs.completed_checklist_items == []


def test_preferences_dump_camel_case():
    data = UserPreferences().model_dump(by_alias=True)
    assert set(data) == {
        "useFahrenheit",
        "darkMode",
        "favoriteRunType",
        "favoriteCities",
        "completedChecklistItems",
    }


def test_preferences_accept_both_key_styles():
    assert UserPreferences(useFahrenheit=False).use_fahrenheit is False
    assert UserPreferences(use_fahrenheit=False).use_fahrenheit is False


def test_favorite_cities_limit():
    """Oversized lists keep the five most recent (leading) cities."""
    cities = [f"City {i}" for i in range(MAX_FAVORITE_CITIES + 1)]
    prefs = UserPreferences(favorite_cities=cities)
    assert prefs.favorite_cities == cities[:MAX_FAVORITE_CITIES]


def test_duplicates_removed_before_limit():
    """Six entries with one repeat are five distinct cities and stay valid."""
    prefs = UserPreferences(favorite_cities=["a", "a", "b", "c", "d", "e"])
    assert prefs.favorite_cities == ["a", "b", "c", "d", "e"]


def test_favorite_cities_must_be_strings():
    with pytest.raises(ValidationError):
        UserPreferences(favorite_cities="Boston")


def test_lists_are_deduplicated():
    prefs = UserPreferences(
        favorite_cities=["Boston", "Denver", "Boston"],
        completed_checklist_items=["route", "route", "hydration"],
    )
    assert prefs.favorite_cities == ["Boston", "Denver"]
    assert prefs.completed_checklist_items == ["route", "hydration"]


def test_invalid_run_type_rejected():
    with pytest.raises(ValidationError):
        UserPreferences(favorite_run_type="sprint")
