"""
Pre-run checklist generation.

Each item is added by an independent gate (run type, heat, cold, sun, rain,
darkness). The final list is ordered by priority only; items with the same
priority stay in the order their gates ran.
"""

from typing import Iterable, List, Optional, Tuple

from runweather.conditions import is_cloudy, is_rainy
from runweather.schemas import (
    ChecklistCategory,
    ChecklistItem,
    ChecklistProgress,
    Priority,
    RunType,
    WeatherObservation,
)

HOT_THRESHOLD_C = 25.0
COLD_THRESHOLD_C = 5.0
UV_THRESHOLD = 3.0


def generate_checklist(
    observation: WeatherObservation,
    run_type: RunType,
    effective_temp_c: float,
    is_night: bool,
    uv_index: float = 0.0,
) -> List[ChecklistItem]:
    """
    Generate the pre-run checklist for an observation.

    Args:
        observation: Current conditions (only condition_main is read)
        run_type: Planned run type
        effective_temp_c: Feels-like temperature in °C
        is_night: Whether it is dark outside
        uv_index: UV index (0 when unknown)

    Returns:
        Checklist items sorted high → medium → low, ties in generation order
    """
    run_type = RunType(run_type)
    condition = observation.condition_main
    is_hot = effective_temp_c > HOT_THRESHOLD_C
    is_cold = effective_temp_c < COLD_THRESHOLD_C
    is_long_run = run_type == RunType.LONG
    is_workout = run_type == RunType.WORKOUT

    checklist = []

    checklist.append(ChecklistItem(
        id="hydration",
        text="Extra hydration (consider electrolytes)" if is_hot else "Pre-hydrate (16-20oz water)",
        category=ChecklistCategory.PERFORMANCE,
        priority=Priority.HIGH if is_hot else Priority.MEDIUM,
    ))

    if is_long_run or is_workout:
        checklist.append(ChecklistItem(
            id="fuel",
            text="Fuel strategy planned (gels, snacks)" if is_long_run else "Light fuel if needed (banana, dates)",
            category=ChecklistCategory.PERFORMANCE,
            priority=Priority.HIGH,
        ))

    if is_hot:
        checklist.append(ChecklistItem(
            id="heat-prep",
            text="Extra water, electrolytes, cooling towel",
            category=ChecklistCategory.SAFETY,
            priority=Priority.HIGH,
        ))

    if uv_index > UV_THRESHOLD or (not is_night and not is_cloudy(condition)):
        checklist.append(ChecklistItem(
            id="sun-protection",
            text="Sunscreen (SPF 30+), sunglasses, hat",
            category=ChecklistCategory.SAFETY,
            priority=Priority.HIGH,
        ))

    if is_cold:
        checklist.append(ChecklistItem(
            id="warmup",
            text="Warm up indoors before heading out",
            category=ChecklistCategory.PERFORMANCE,
            priority=Priority.MEDIUM,
        ))

    if is_rainy(condition):
        checklist.append(ChecklistItem(
            id="rain-prep",
            text="Phone protection, dry clothes ready post-run",
            category=ChecklistCategory.COMFORT,
            priority=Priority.MEDIUM,
        ))

    if is_night:
        checklist.append(ChecklistItem(
            id="visibility",
            text="Reflective gear, lights, tell someone your route",
            category=ChecklistCategory.SAFETY,
            priority=Priority.HIGH,
        ))

    checklist.append(ChecklistItem(
        id="route",
        text="Route planned, distance/time goal set",
        category=ChecklistCategory.PERFORMANCE,
        priority=Priority.MEDIUM,
    ))

    checklist.append(ChecklistItem(
        id="logistics",
        text="Post-run logistics (shower, change, snack)",
        category=ChecklistCategory.COMFORT,
        priority=Priority.LOW,
    ))

    # sorted() is stable: equal priorities keep gate order
    return sorted(checklist, key=lambda item: item.priority.rank)


def apply_completion(
    items: List[ChecklistItem], completed_ids: Iterable[str]
) -> List[ChecklistItem]:
    """
    Re-apply stored completion state to a freshly generated checklist.

    Args:
        items: Checklist items (not modified)
        completed_ids: Ids the runner previously ticked off

    Returns:
        New items with completed set by id match
    """
    completed = set(completed_ids)
    return [
        item.model_copy(update={"completed": item.id in completed})
        for item in items
    ]


def toggle_item(
    items: List[ChecklistItem], item_id: str
) -> Tuple[List[ChecklistItem], List[str]]:
    """
    Flip the completed flag of one item.

    Args:
        items: Current checklist (not modified)
        item_id: Id of the item to toggle; unknown ids change nothing

    Returns:
        Tuple of (updated items, ids now completed in checklist order)
    """
    updated = [
        item.model_copy(update={"completed": not item.completed}) if item.id == item_id else item
        for item in items
    ]
    completed_ids = [item.id for item in updated if item.completed]
    return updated, completed_ids


def find_item(items: List[ChecklistItem], item_id: str) -> Optional[ChecklistItem]:
    return next((item for item in items if item.id == item_id), None)


def checklist_progress(items: List[ChecklistItem]) -> ChecklistProgress:
    """Summarize how much of a checklist is done."""
    completed = sum(1 for item in items if item.completed)
    high_priority_incomplete = sum(
        1 for item in items if item.priority == Priority.HIGH and not item.completed
    )
    return ChecklistProgress(
        completed=completed,
        total=len(items),
        high_priority_incomplete=high_priority_incomplete,
        all_complete=completed == len(items),
    )
