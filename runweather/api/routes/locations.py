"""
Location API Routes

Turns geocoding results fetched by the client into selectable city options.
"""

from fastapi import APIRouter, HTTPException, status

from runweather.api.models.requests import LocationRequest
from runweather.api.models.responses import LocationsResponse
from runweather.observation import MIN_CITY_QUERY_LENGTH, is_searchable_query, parse_city_options

router = APIRouter()


@router.post("/locations", response_model=LocationsResponse)
async def city_options(request: LocationRequest) -> LocationsResponse:
    """
    Parse geocoding results into city options.

    Raises:
        HTTPException: 400 if the query is too short to search
        LocationUnavailable: If nothing matched (404)
    """
    if not is_searchable_query(request.query):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Query must be at least {MIN_CITY_QUERY_LENGTH} characters",
        )

    options = parse_city_options(request.results)
    return LocationsResponse(options=options, count=len(options))
