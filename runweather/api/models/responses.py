"""
API Response Models

Pydantic models for API responses.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from runweather.observation import CityOption
from runweather.schemas import ChecklistItem, ChecklistProgress, GearRecommendation


class RunTypeInfo(BaseModel):
    """Run type option for selection lists."""

    id: str = Field(..., description="Run type value")
    name: str = Field(..., description="Display name")


class RunTypesResponse(BaseModel):
    """Response for GET /api/run-types."""

    run_types: List[RunTypeInfo]
    count: int


class GearResponse(BaseModel):
    """Response for POST /api/gear."""

    gear: List[GearRecommendation] = Field(..., description="Up to three suggestions")
    count: int = Field(..., description="Number of suggestions")


class ChecklistResponse(BaseModel):
    """Response for POST /api/checklist."""

    items: List[ChecklistItem] = Field(..., description="Checklist in display order")
    progress: ChecklistProgress


class InsightResponse(BaseModel):
    """Response for POST /api/insight."""

    insight: str = Field(..., description="One-line weather insight")


class LocationsResponse(BaseModel):
    """Response for POST /api/locations."""

    options: List[CityOption]
    count: int


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    retryable: bool = Field(False, description="Whether retrying may succeed")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional details")
