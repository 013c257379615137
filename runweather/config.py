"""
Runtime settings.

Values come from environment variables (a local .env file is honoured) and
fall back to defaults suitable for a single-user install.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from runweather.database import SqlPreferenceBackend, init_database
from runweather.gear import DEFAULT_CATALOG_PATH
from runweather.preferences import InMemoryBackend, JsonFileBackend, PreferenceStore

load_dotenv()

PREFERENCE_BACKENDS = ("json", "sql", "memory")


def _optional(key: str) -> Optional[str]:
    value = os.getenv(key)
    return value or None


@dataclass(frozen=True)
class Settings:
    prefs_backend: str = "json"
    prefs_path: Path = Path("~/.runweather/preferences.json")
    database_url: str = "sqlite:///runweather.db"
    gear_catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        backend = os.getenv("RUNWEATHER_PREFS_BACKEND", cls.prefs_backend).lower()
        if backend not in PREFERENCE_BACKENDS:
            raise RuntimeError(
                f"RUNWEATHER_PREFS_BACKEND must be one of {PREFERENCE_BACKENDS}, got '{backend}'"
            )
        log_file = _optional("RUNWEATHER_LOG_FILE")
        return cls(
            prefs_backend=backend,
            prefs_path=Path(os.getenv("RUNWEATHER_PREFS_PATH", str(cls.prefs_path))),
            database_url=os.getenv("RUNWEATHER_DATABASE_URL", cls.database_url),
            gear_catalog_path=Path(os.getenv("RUNWEATHER_GEAR_CATALOG", str(cls.gear_catalog_path))),
            log_level=os.getenv("RUNWEATHER_LOG_LEVEL", cls.log_level).upper(),
            log_file=Path(log_file) if log_file else None,
        )


def build_preference_store(settings: Settings) -> PreferenceStore:
    """
    Create the preference store selected by the settings.

    Args:
        settings: Runtime settings

    Returns:
        PreferenceStore backed by a JSON file, a SQL table or memory
    """
    if settings.prefs_backend == "sql":
        backend = SqlPreferenceBackend(init_database(settings.database_url))
    elif settings.prefs_backend == "memory":
        backend = InMemoryBackend()
    else:
        backend = JsonFileBackend(settings.prefs_path)

    return PreferenceStore(backend)
