"""
Gear catalog loading and filtering.

The catalog is curated configuration data (data/gear_catalog.json). Filtering
is a plain predicate over condition tags: no scoring, no shuffling, so the same
observation always yields the same suggestions.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from runweather.conditions import derive_condition_tags
from runweather.schemas import ConditionTag, GearRecommendation

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "gear_catalog.json"
MAX_GEAR_SUGGESTIONS = 3


def load_gear_catalog(catalog_path: Path = DEFAULT_CATALOG_PATH) -> List[GearRecommendation]:
    """
    Load and validate a gear catalog from a JSON file.

    Args:
        catalog_path: Path to a JSON array of gear entries

    Returns:
        Catalog entries in file order

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        ValueError: If the catalog JSON is invalid
    """
    catalog_path = Path(catalog_path)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Gear catalog not found: {catalog_path}")

    with open(catalog_path, "r", encoding="utf-8") as f:
        try:
            entries = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid gear catalog file: {e}")

    if not isinstance(entries, list):
        raise ValueError("Invalid gear catalog file: expected a JSON array")

    try:
        catalog = [GearRecommendation(**entry) for entry in entries]
    except (TypeError, ValidationError) as e:
        raise ValueError(f"Invalid gear catalog file: {e}")

    ids = [item.id for item in catalog]
    if len(ids) != len(set(ids)):
        raise ValueError("Invalid gear catalog file: duplicate gear ids")

    return catalog


@lru_cache(maxsize=1)
def _default_catalog() -> tuple:
    return tuple(load_gear_catalog(DEFAULT_CATALOG_PATH))


def default_catalog() -> List[GearRecommendation]:
    """Return the shipped catalog (loaded once per process)."""
    return list(_default_catalog())


def filter_gear(
    effective_temp_c: float,
    condition_main: str,
    wind_speed_mps: float,
    is_night: bool,
    catalog: Optional[Sequence[GearRecommendation]] = None,
) -> List[GearRecommendation]:
    """
    Select catalog entries relevant to the current conditions.

    An entry qualifies if any of its tags is among the derived condition tags,
    or if it is tagged ``any``. Catalog order is kept and at most three entries
    are returned.

    Args:
        effective_temp_c: Feels-like temperature in °C
        condition_main: Provider weather category
        wind_speed_mps: Wind speed in m/s
        is_night: Whether it is dark outside
        catalog: Entries to filter (defaults to the shipped catalog)

    Returns:
        Up to three qualifying entries
    """
    if catalog is None:
        catalog = default_catalog()

    current = derive_condition_tags(effective_temp_c, condition_main, wind_speed_mps, is_night)

    relevant = [
        item
        for item in catalog
        if ConditionTag.ANY in item.conditions
        or any(tag in current for tag in item.conditions)
    ]

    return relevant[:MAX_GEAR_SUGGESTIONS]
