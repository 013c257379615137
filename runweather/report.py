"""
Run report assembly and export.

A RunReport bundles every recommendation for one observation and run type.
Callers rebuild it whenever the observation, the run type or the checklist
state changes, and can export it to JSON or Markdown.
"""

import json
from pathlib import Path
from typing import Optional, Sequence

from runweather.checklist import apply_completion, checklist_progress, generate_checklist
from runweather.clothing import recommend
from runweather.gear import filter_gear
from runweather.insight import weather_insight
from runweather.schemas import (
    GearRecommendation,
    Priority,
    RunReport,
    RunType,
    UserPreferences,
    WeatherObservation,
)
from runweather.units import format_temp, format_wind

REPORT_FORMATS = ("json", "markdown")


def build_report(
    observation: WeatherObservation,
    run_type: RunType,
    preferences: Optional[UserPreferences] = None,
    catalog: Optional[Sequence[GearRecommendation]] = None,
) -> RunReport:
    """
    Run every recommendation function for an observation.

    Args:
        observation: Current conditions
        run_type: Planned run type
        preferences: Stored preferences; completed checklist ids are re-applied
        catalog: Gear catalog (defaults to the shipped catalog)

    Returns:
        RunReport with clothing, gear, checklist, progress and insight
    """
    run_type = RunType(run_type)
    effective_temp = observation.effective_temp_c

    clothing = recommend(
        effective_temp,
        observation.condition_main,
        observation.wind_speed_mps,
        observation.humidity_pct,
        observation.is_night,
        run_type,
    )

    checklist = generate_checklist(
        observation,
        run_type,
        effective_temp,
        observation.is_night,
        observation.uv_index,
    )
    if preferences is not None:
        checklist = apply_completion(checklist, preferences.completed_checklist_items)

    gear = filter_gear(
        effective_temp,
        observation.condition_main,
        observation.wind_speed_mps,
        observation.is_night,
        catalog,
    )

    insight = weather_insight(
        observation.temperature_c,
        observation.feels_like_c,
        observation.wind_speed_mps,
        observation.humidity_pct,
    )

    return RunReport(
        observation=observation,
        run_type=run_type,
        clothing=clothing,
        gear=gear,
        checklist=checklist,
        progress=checklist_progress(checklist),
        insight=insight,
    )


def report_to_markdown(report: RunReport, use_fahrenheit: bool = True) -> str:
    """
    Export a report to human-readable Markdown.

    Args:
        report: The report to render
        use_fahrenheit: Display temperatures in °F

    Returns:
        Markdown-formatted report
    """
    obs = report.observation
    lines = []

    # Header
    title = obs.location_name or "Current location"
    lines.append(f"# Running Weather: {title}")
    lines.append("")
    lines.append(f"**Generated:** {report.generated_at.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append(f"**Run Type:** {report.run_type.display_name}")
    lines.append(
        f"**Temperature:** {format_temp(obs.temperature_c, use_fahrenheit)} "
        f"(feels like {format_temp(obs.feels_like_c, use_fahrenheit)})"
    )
    lines.append(f"**Conditions:** {obs.description or obs.condition_main}")
    lines.append(f"**Wind:** {format_wind(obs.wind_speed_mps, use_fahrenheit)}")
    lines.append(f"**Humidity:** {obs.humidity_pct:.0f}%")
    lines.append("")
    lines.append(f"> {report.insight}")
    lines.append("")
    lines.append("---")
    lines.append("")

    # Clothing
    lines.append("## What to Wear")
    lines.append("")
    sections = [
        ("Top", report.clothing.top),
        ("Bottom", report.clothing.bottom),
        ("Accessories", report.clothing.accessories),
        ("Footwear", report.clothing.footwear),
    ]
    for heading, items in sections:
        if not items:
            continue
        lines.append(f"### {heading}")
        for item in items:
            lines.append(f"- {item}")
        lines.append("")

    lines.append("---")
    lines.append("")

    # Checklist
    progress = report.progress
    lines.append("## Running Checklist")
    lines.append("")
    lines.append(f"**Progress:** {progress.completed}/{progress.total} complete")
    if progress.high_priority_incomplete:
        lines.append(f"**High priority remaining:** {progress.high_priority_incomplete}")
    lines.append("")
    for item in report.checklist:
        box = "x" if item.completed else " "
        flag = " **(high)**" if item.priority == Priority.HIGH else ""
        lines.append(f"- [{box}] {item.text}{flag}")
    lines.append("")

    # Gear
    if report.gear:
        lines.append("---")
        lines.append("")
        lines.append("## Recommended Gear")
        lines.append("")
        for gear in report.gear:
            lines.append(f"### {gear.brand} {gear.name} ({gear.price})")
            lines.append(gear.description)
            for retailer in gear.retailers:
                price = f" ({retailer.price})" if retailer.price else ""
                lines.append(f"- [{retailer.name}]({retailer.link}){price}")
            lines.append("")

    return "\n".join(lines)


def save_report_to_file(
    report: RunReport,
    output_path: Path,
    format: str = "markdown",
    use_fahrenheit: bool = True,
) -> Path:
    """
    Save report to a file in the specified format.

    Args:
        report: The report to save
        output_path: File to write
        format: Output format ("json" or "markdown")
        use_fahrenheit: Temperature unit for Markdown output

    Returns:
        Path to saved file

    Raises:
        ValueError: If format is not supported
    """
    if format not in REPORT_FORMATS:
        raise ValueError(f"Unsupported format: {format}. Use 'json' or 'markdown'")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if format == "json":
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(report_to_markdown(report, use_fahrenheit))

    return output_path
