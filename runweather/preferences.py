"""
User preference persistence.

Preferences live in a caller-provided key-value backend under a single key.
Loading merges whatever was stored over the defaults field by field, so records
written before a preference existed still load. Saving is fire-and-forget:
a failing backend is logged and otherwise ignored.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from pydantic import ValidationError

from runweather.schemas import MAX_FAVORITE_CITIES, RunType, UserPreferences

log = logging.getLogger("runweather.preferences")

PREFERENCES_KEY = "runningWeatherPrefs"
DEFAULT_PREFERENCES = UserPreferences()

# stored (camelCase) key -> model field
PREFERENCE_FIELDS: Dict[str, str] = {
    field.alias or name: name
    for name, field in UserPreferences.model_fields.items()
}


class PreferenceBackend(Protocol):
    """Minimal key-value storage contract."""

    def read(self, key: str) -> Optional[str]:
        ...

    def write(self, key: str, value: str) -> None:
        ...


class InMemoryBackend:
    """Dictionary-backed storage, for tests and the API's default process store."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def write(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileBackend:
    """
    Stores all keys in one JSON object on disk.

    The file is rewritten on every write; parent directories are created as
    needed.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Preference file is not a JSON object: {self.path}")
        return data

    def read(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def write(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (OSError, ValueError):
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def merge_preferences(base: UserPreferences, partial: Dict[str, Any]) -> UserPreferences:
    """
    Apply a partial record to preferences, one known field at a time.

    Keys may be the stored camelCase names or the Python field names. Unknown
    keys are ignored.

    Args:
        base: Preferences to start from
        partial: Field values to override

    Returns:
        New validated UserPreferences

    Raises:
        ValidationError: If a known field has an invalid value
    """
    merged = base.model_dump()
    for key, value in partial.items():
        field_name = PREFERENCE_FIELDS.get(key, key)
        if field_name in UserPreferences.model_fields:
            merged[field_name] = value
    return UserPreferences.model_validate(merged)


def serialize(preferences: UserPreferences) -> str:
    return preferences.model_dump_json(by_alias=True)


def deserialize(text: str) -> UserPreferences:
    """
    Parse a stored record and merge it over the defaults.

    Raises:
        ValueError: If the text is not a JSON object or holds invalid values
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Stored preferences are not a JSON object")
    return merge_preferences(DEFAULT_PREFERENCES, data)


def add_favorite(cities: list, city: str) -> list:
    """
    Put a city at the front of the favorites list.

    An existing entry moves to the front. When the list is full the oldest
    (last) entry is evicted.
    """
    remaining = [c for c in cities if c != city]
    return [city] + remaining[: MAX_FAVORITE_CITIES - 1]


class PreferenceStore:
    """
    Loads, mutates and persists UserPreferences.

    Every mutation returns the new preferences and saves them immediately.
    The store keeps the latest value in ``current``.
    """

    def __init__(self, backend: PreferenceBackend, key: str = PREFERENCES_KEY):
        """
        Initialize store with a backend.

        Args:
            backend: Key-value storage
            key: Storage key for the preference record
        """
        self.backend = backend
        self.key = key
        self.current = self.load()

    def load(self) -> UserPreferences:
        """
        Load preferences, falling back to defaults on any failure.

        Returns:
            Stored preferences merged over defaults
        """
        try:
            saved = self.backend.read(self.key)
            if saved:
                return deserialize(saved)
        except (OSError, ValueError, ValidationError) as e:
            log.warning("Could not load preferences: %s", e)
        return DEFAULT_PREFERENCES

    def save(self, preferences: UserPreferences) -> None:
        """Persist preferences; failures are logged and ignored."""
        try:
            self.backend.write(self.key, serialize(preferences))
        except Exception as e:
            log.warning("Could not save preferences: %s", e)

    def update(self, **changes: Any) -> UserPreferences:
        """
        Apply field changes, persist, and return the new preferences.

        Raises:
            ValidationError: If a change is invalid (nothing is saved)
        """
        self.current = merge_preferences(self.current, changes)
        self.save(self.current)
        return self.current

    def toggle_temperature_unit(self) -> UserPreferences:
        return self.update(use_fahrenheit=not self.current.use_fahrenheit)

    def toggle_dark_mode(self) -> UserPreferences:
        return self.update(dark_mode=not self.current.dark_mode)

    def set_run_type(self, run_type: RunType) -> UserPreferences:
        return self.update(favorite_run_type=RunType(run_type))

    def add_favorite_city(self, city: str) -> UserPreferences:
        return self.update(favorite_cities=add_favorite(self.current.favorite_cities, city))

    def remove_favorite_city(self, city: str) -> UserPreferences:
        return self.update(
            favorite_cities=[c for c in self.current.favorite_cities if c != city]
        )

    def set_completed_items(self, item_ids: list) -> UserPreferences:
        return self.update(completed_checklist_items=list(item_ids))
