"""
Clothing recommendation tables.

Maps the feels-like temperature, precipitation and wind onto ordered lists of
top layers, bottoms, accessories and footwear. Band boundaries and item wording
are fixed: runners compare suggestions day to day, so they must not drift.
"""

from typing import List, Tuple

from runweather.conditions import is_rainy, is_snowy, is_windy
from runweather.schemas import ClothingRecommendation, RunType

# (inclusive upper bound in °C, top layers); the last band is open-ended
TOP_LAYER_BANDS: List[Tuple[float, List[str]]] = [
    (-5.0, ["Thermal base layer", "Insulated jacket", "Wind-resistant outer layer"]),
    (0.0, ["Thermal long-sleeve", "Insulated vest or light jacket"]),
    (5.0, ["Long-sleeve technical shirt", "Light wind jacket"]),
    (10.0, ["Long-sleeve shirt"]),
    (15.0, ["Short-sleeve technical shirt"]),
    (25.0, ["Lightweight short-sleeve or tank"]),
]
HOT_TOP_LAYERS = ["Minimal clothing", "Tank top or shirtless"]

BOTTOM_LAYER_BANDS: List[Tuple[float, List[str]]] = [
    (0.0, ["Thermal tights", "Wind-resistant running pants"]),
    (10.0, ["Running tights or thermal leggings"]),
    (20.0, ["Running shorts or capris"]),
]
WARM_BOTTOM_LAYERS = ["Lightweight running shorts"]

RAIN_ACCESSORIES = ["Waterproof jacket", "Hat with brim", "Water-resistant gloves"]
FREEZING_ACCESSORIES = ["Warm beanie", "Insulated gloves", "Neck gaiter", "Face protection"]
CHILLY_ACCESSORIES = ["Light gloves", "Beanie or headband"]
WIND_ACCESSORIES = ["Wind-resistant gloves", "Ear protection"]
NIGHT_ACCESSORIES = ["Reflective vest", "LED lights", "Headlamp"]

GRIP_FOOTWEAR = ["Trail shoes with good grip", "Moisture-wicking socks"]
REGULAR_FOOTWEAR = ["Regular running shoes", "Moisture-wicking socks"]
TOE_WARMER_HINT = "Consider: toe warmers"

WINDBREAKER_HINT = "Light windbreaker"
WARMUP_LAYER_HINT = "Optional: light long-sleeve for warm-up"
WIND_ACCESSORY_MAX_TEMP_C = 15.0


def _band(bands: List[Tuple[float, List[str]]], fallback: List[str], temp_c: float) -> List[str]:
    for upper_bound, items in bands:
        if temp_c <= upper_bound:
            return list(items)
    return list(fallback)


def recommend(
    effective_temp_c: float,
    condition_main: str,
    wind_speed_mps: float,
    humidity_pct: float,
    is_night: bool,
    run_type: RunType,
) -> ClothingRecommendation:
    """
    Build clothing recommendations for a run.

    Every band decision uses the feels-like temperature. Humidity is accepted
    for interface stability but does not change the tables.

    Args:
        effective_temp_c: Feels-like temperature in °C
        condition_main: Provider weather category (substring-matched)
        wind_speed_mps: Wind speed in m/s
        humidity_pct: Relative humidity (unused)
        is_night: Whether it is dark outside
        run_type: Planned run type

    Returns:
        ClothingRecommendation with non-empty top and bottom lists
    """
    run_type = RunType(run_type)
    windy = is_windy(wind_speed_mps)
    rainy = is_rainy(condition_main)
    snowy = is_snowy(condition_main)

    top = _band(TOP_LAYER_BANDS, HOT_TOP_LAYERS, effective_temp_c)
    if 5.0 < effective_temp_c <= 10.0 and windy:
        top.append(WINDBREAKER_HINT)
    elif 10.0 < effective_temp_c <= 15.0 and run_type in (RunType.EASY, RunType.RECOVERY):
        top.append(WARMUP_LAYER_HINT)

    bottom = _band(BOTTOM_LAYER_BANDS, WARM_BOTTOM_LAYERS, effective_temp_c)

    accessories = []
    if rainy:
        accessories.extend(RAIN_ACCESSORIES)

    if snowy or effective_temp_c <= -5.0:
        accessories.extend(FREEZING_ACCESSORIES)
    elif effective_temp_c <= 5.0:
        accessories.extend(CHILLY_ACCESSORIES)

    if windy and effective_temp_c <= WIND_ACCESSORY_MAX_TEMP_C:
        accessories.extend(WIND_ACCESSORIES)

    if is_night:
        accessories.extend(NIGHT_ACCESSORIES)

    footwear = list(GRIP_FOOTWEAR if rainy or snowy else REGULAR_FOOTWEAR)
    if effective_temp_c <= 0.0:
        footwear.append(TOE_WARMER_HINT)

    return ClothingRecommendation(
        top=top,
        bottom=bottom,
        accessories=accessories,
        footwear=footwear,
    )
