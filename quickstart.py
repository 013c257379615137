#!/usr/bin/env python3
"""
Quick start script to demonstrate the running weather recommender.

This script shows the complete workflow:
1. Parse an OpenWeather payload into an observation
2. Build clothing, gear, checklist and insight recommendations
3. Tick off a checklist item and persist it in preferences
4. Rebuild the report with the saved progress
5. Compare the same run across temperature bands
"""

import json
import tempfile
from pathlib import Path

from rich import box
from rich.console import Console
from rich.table import Table

from runweather.checklist import toggle_item
from runweather.clothing import recommend
from runweather.observation import observation_from_openweather
from runweather.preferences import JsonFileBackend, PreferenceStore
from runweather.report import build_report
from runweather.schemas import RunType
from runweather.units import format_temp

console = Console()


def print_header(title: str):
    """Print a formatted header."""
    console.print(f"\n[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))


def main():
    """Run the complete demonstration workflow."""
    console.print("\n[bold magenta]🏃 Running Weather[/bold magenta]")
    console.print("[dim]Demonstration of complete workflow[/dim]\n")

    # ===== STEP 1: Parse Observation =====
    print_header("Step 1: Parse Observation")

    payload_path = Path("tests/fixtures/openweather_rain_evening.json")
    with open(payload_path) as f:
        payload = json.load(f)

    observation = observation_from_openweather(payload, now=payload["dt"])
    console.print(f"✓ Location: [green]{observation.location_name}[/green]")
    console.print(
        f"  {format_temp(observation.temperature_c, True)} "
        f"(feels like {format_temp(observation.feels_like_c, True)}), {observation.condition_main}"
    )
    console.print(f"  Night: {observation.is_night}")

    # ===== STEP 2: Build Report =====
    print_header("Step 2: Build Report")

    with tempfile.TemporaryDirectory() as tmp:
        store = PreferenceStore(JsonFileBackend(Path(tmp) / "preferences.json"))
        report = build_report(observation, RunType.LONG, store.current)

        console.print(f"  {report.insight}")
        console.print(f"  Top: {', '.join(report.clothing.top)}")
        console.print(f"  Bottom: {', '.join(report.clothing.bottom)}")
        console.print(f"  Accessories: {', '.join(report.clothing.accessories)}")
        console.print(f"  Gear: {', '.join(g.name for g in report.gear)}")

        # ===== STEP 3: Tick Off an Item =====
        print_header("Step 3: Tick Off an Item")

        _, completed = toggle_item(report.checklist, "hydration")
        store.set_completed_items(completed)
        console.print(f"✓ Saved completed items: {store.current.completed_checklist_items}")

        # ===== STEP 4: Rebuild With Saved Progress =====
        print_header("Step 4: Rebuild With Saved Progress")

        reloaded = PreferenceStore(JsonFileBackend(Path(tmp) / "preferences.json"))
        report = build_report(observation, RunType.LONG, reloaded.current)
        for item in report.checklist:
            mark = "✅" if item.completed else "⬜"
            console.print(f"  {mark} [{item.priority.value}] {item.text}")

    # ===== STEP 5: Temperature Bands =====
    print_header("Step 5: Temperature Bands")

    table = Table(title="Easy run, dry and calm", box=box.ROUNDED)
    table.add_column("Feels like", justify="right", style="cyan")
    table.add_column("Top")
    table.add_column("Bottom")

    for temp in (-10, -2, 3, 8, 12, 20, 30):
        recs = recommend(temp, "Clear", 2.0, 50.0, False, RunType.EASY)
        table.add_row(format_temp(temp, False), "\n".join(recs.top), "\n".join(recs.bottom))

    console.print(table)
    console.print()


if __name__ == "__main__":
    main()
