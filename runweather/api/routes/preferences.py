"""
Preferences API Routes

Endpoints for reading and changing stored preferences. Every change is saved
immediately.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from runweather.api.deps import get_store
from runweather.api.models.requests import FavoriteCityRequest, PreferencesUpdate
from runweather.preferences import PreferenceStore
from runweather.schemas import UserPreferences

router = APIRouter()


@router.get("/preferences", response_model=UserPreferences)
async def get_preferences(store: PreferenceStore = Depends(get_store)) -> UserPreferences:
    """Current preferences (camelCase keys, as stored)."""
    return store.current


@router.patch("/preferences", response_model=UserPreferences)
async def update_preferences(
    update: PreferencesUpdate,
    store: PreferenceStore = Depends(get_store),
) -> UserPreferences:
    """Apply a partial update; omitted fields keep their value."""
    changes = update.model_dump(exclude_none=True)
    if not changes:
        return store.current

    return store.update(**changes)


@router.post("/preferences/favorites", response_model=UserPreferences)
async def add_favorite_city(
    request: FavoriteCityRequest,
    store: PreferenceStore = Depends(get_store),
) -> UserPreferences:
    """Add a city at the front of favorites, evicting the oldest beyond five."""
    return store.add_favorite_city(request.city)


@router.delete("/preferences/favorites/{city}", response_model=UserPreferences)
async def remove_favorite_city(
    city: str,
    store: PreferenceStore = Depends(get_store),
) -> UserPreferences:
    """Remove a favorite city."""
    if city not in store.current.favorite_cities:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"City '{city}' is not a favorite",
        )
    return store.remove_favorite_city(city)
