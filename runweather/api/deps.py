"""
Shared API dependencies.
"""

from functools import lru_cache
from typing import List

from runweather.config import Settings, build_preference_store
from runweather.gear import load_gear_catalog
from runweather.preferences import PreferenceStore
from runweather.schemas import GearRecommendation


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=1)
def get_catalog() -> List[GearRecommendation]:
    """Gear catalog selected by RUNWEATHER_GEAR_CATALOG, loaded once."""
    return load_gear_catalog(get_settings().gear_catalog_path)


@lru_cache(maxsize=1)
def get_store() -> PreferenceStore:
    """Process-wide preference store (override in tests via dependency_overrides)."""
    return build_preference_store(get_settings())
