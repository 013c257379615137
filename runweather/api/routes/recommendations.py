"""
Recommendation API Routes

Endpoints exposing the clothing, gear, checklist and insight functions, plus a
combined run report.
"""

from typing import List

from fastapi import APIRouter, Depends

from runweather.api.deps import get_catalog, get_store
from runweather.api.models.requests import (
    ChecklistRequest,
    ClothingRequest,
    ObservationRequest,
    OpenWeatherRequest,
    RecommendationRequest,
)
from runweather.api.models.responses import (
    ChecklistResponse,
    GearResponse,
    InsightResponse,
    RunTypeInfo,
    RunTypesResponse,
)
from runweather.checklist import apply_completion, checklist_progress, generate_checklist
from runweather.clothing import recommend
from runweather.gear import filter_gear
from runweather.insight import weather_insight
from runweather.observation import observation_from_openweather
from runweather.preferences import PreferenceStore
from runweather.report import build_report
from runweather.schemas import ClothingRecommendation, GearRecommendation, RunReport, RunType

router = APIRouter()


@router.get("/run-types", response_model=RunTypesResponse)
async def list_run_types() -> RunTypesResponse:
    """List selectable run types."""
    run_types = [RunTypeInfo(id=rt.value, name=rt.display_name) for rt in RunType]
    return RunTypesResponse(run_types=run_types, count=len(run_types))


@router.post("/recommendations", response_model=RunReport)
async def create_report(
    request: RecommendationRequest,
    store: PreferenceStore = Depends(get_store),
    catalog: List[GearRecommendation] = Depends(get_catalog),
) -> RunReport:
    """
    Build a full run report: clothing, gear, checklist and insight.

    Uses the stored favorite run type when none is given, and re-applies the
    stored checklist completion unless ``apply_saved_progress`` is false.
    """
    prefs = store.current
    run_type = request.run_type or prefs.favorite_run_type
    return build_report(
        request.observation,
        run_type,
        prefs if request.apply_saved_progress else None,
        catalog,
    )


@router.post("/recommendations/openweather", response_model=RunReport)
async def create_report_from_openweather(
    request: OpenWeatherRequest,
    store: PreferenceStore = Depends(get_store),
    catalog: List[GearRecommendation] = Depends(get_catalog),
) -> RunReport:
    """
    Build a run report from a raw OpenWeather current-weather payload.

    Raises:
        WeatherFetchFailed: If the payload is an error response or malformed (502)
    """
    observation = observation_from_openweather(
        request.payload, now=request.now, uv_index=request.uv_index
    )
    prefs = store.current
    return build_report(observation, request.run_type or prefs.favorite_run_type, prefs, catalog)


@router.post("/clothing", response_model=ClothingRecommendation)
async def clothing(request: ClothingRequest) -> ClothingRecommendation:
    """Clothing recommendations for an observation."""
    obs = request.observation
    return recommend(
        obs.effective_temp_c,
        obs.condition_main,
        obs.wind_speed_mps,
        obs.humidity_pct,
        obs.is_night,
        request.run_type,
    )


@router.post("/gear", response_model=GearResponse)
async def gear(
    request: ObservationRequest,
    catalog: List[GearRecommendation] = Depends(get_catalog),
) -> GearResponse:
    """Up to three gear suggestions from the configured catalog."""
    obs = request.observation
    items = filter_gear(
        obs.effective_temp_c, obs.condition_main, obs.wind_speed_mps, obs.is_night, catalog
    )
    return GearResponse(gear=items, count=len(items))


@router.post("/checklist", response_model=ChecklistResponse)
async def checklist(request: ChecklistRequest) -> ChecklistResponse:
    """Pre-run checklist with optional completion state."""
    obs = request.observation
    items = generate_checklist(obs, request.run_type, obs.effective_temp_c, obs.is_night, obs.uv_index)
    items = apply_completion(items, request.completed_items)
    return ChecklistResponse(items=items, progress=checklist_progress(items))


@router.post("/insight", response_model=InsightResponse)
async def insight(request: ObservationRequest) -> InsightResponse:
    """One-line weather insight."""
    obs = request.observation
    return InsightResponse(
        insight=weather_insight(obs.temperature_c, obs.feels_like_c, obs.wind_speed_mps, obs.humidity_pct)
    )
