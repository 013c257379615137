"""
Command-line interface for the running weather recommender.

Provides commands for:
- Clothing, gear and checklist recommendations for an observation
- Viewing and changing stored preferences
- Ticking off checklist items
"""

import json
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from runweather.checklist import checklist_progress, find_item, toggle_item
from runweather.config import Settings, build_preference_store
from runweather.errors import WeatherFetchFailed
from runweather.gear import load_gear_catalog
from runweather.logger import setup_logging
from runweather.observation import observation_from_openweather
from runweather.preferences import PreferenceStore
from runweather.report import build_report, save_report_to_file
from runweather.schemas import Priority, RunReport, RunType, UserPreferences, WeatherObservation
from runweather.units import format_temp, format_wind

# Initialize Typer apps and Rich console
app = typer.Typer(help="Running weather - what to wear and bring for today's run")
prefs_app = typer.Typer(help="View and change stored preferences")
checklist_app = typer.Typer(help="Work through the pre-run checklist")
app.add_typer(prefs_app, name="prefs")
app.add_typer(checklist_app, name="checklist")
console = Console()

PRIORITY_STYLES = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "dim",
}


@app.callback()
def main():
    """Configure logging before any command runs."""
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_file)


# ===== SHARED OPTIONS =====

ObservationFile = typer.Option(
    None,
    "--observation",
    "-o",
    help="JSON file with an OpenWeather current-weather payload or a WeatherObservation",
    exists=True,
)
TempOption = typer.Option(None, "--temp", "-t", help="Air temperature (°C)")
FeelsLikeOption = typer.Option(None, "--feels-like", help="Feels-like temperature (°C), defaults to --temp")
HumidityOption = typer.Option(50.0, "--humidity", help="Relative humidity (%)")
ConditionOption = typer.Option("Clear", "--condition", "-c", help="Weather category, e.g. Rain, Clouds")
WindOption = typer.Option(0.0, "--wind", "-w", help="Wind speed (m/s)")
NightOption = typer.Option(False, "--night/--day", help="Whether it is dark outside")
UvOption = typer.Option(0.0, "--uv", help="UV index")
RunTypeOption = typer.Option(None, "--run-type", "-r", help="Run type (defaults to your favorite)")


def _open_store() -> PreferenceStore:
    return build_preference_store(Settings.from_env())


def _load_observation(
    observation_file: Optional[Path],
    temp: Optional[float],
    feels_like: Optional[float],
    humidity: float,
    condition: str,
    wind: float,
    night: bool,
    uv: float,
) -> WeatherObservation:
    """
    Build an observation from a file or from command-line values.

    Exits with status 1 when neither source is usable.
    """
    if observation_file:
        try:
            with open(observation_file, encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict) and ("main" in data or "cod" in data):
                return observation_from_openweather(data, uv_index=uv)
            return WeatherObservation(**data)
        except (OSError, ValueError, TypeError, WeatherFetchFailed) as e:
            console.print(f"[red]✗ Failed to load observation: {e}[/red]")
            raise typer.Exit(1)

    if temp is None:
        console.print("[red]✗ Provide --observation FILE or at least --temp[/red]")
        raise typer.Exit(1)

    try:
        return WeatherObservation(
            temperature_c=temp,
            feels_like_c=temp if feels_like is None else feels_like,
            humidity_pct=humidity,
            condition_main=condition,
            wind_speed_mps=wind,
            is_night=night,
            uv_index=uv,
        )
    except ValidationError as e:
        console.print(f"[red]✗ Invalid weather values: {e}[/red]")
        raise typer.Exit(1)


# ===== DISPLAY HELPER FUNCTIONS =====


def _display_weather(report: RunReport, use_fahrenheit: bool):
    """Display the observation and insight in a panel."""
    obs = report.observation
    content = []
    content.append(f"[bold]{obs.location_name or 'Current location'}[/bold]")
    content.append(
        f"{format_temp(obs.temperature_c, use_fahrenheit)} "
        f"(feels like {format_temp(obs.feels_like_c, use_fahrenheit)})"
    )
    content.append(f"{obs.description or obs.condition_main}")
    content.append(f"Wind: {format_wind(obs.wind_speed_mps, use_fahrenheit)}  Humidity: {obs.humidity_pct:.0f}%")
    if obs.is_night:
        content.append("[yellow]Running after dark[/yellow]")
    content.append(f"\n{report.insight}")

    console.print(Panel("\n".join(content), title="Current Weather", border_style="cyan"))


def _display_clothing(report: RunReport):
    """Display clothing recommendations as a table."""
    table = Table(title=f"What to Wear - {report.run_type.display_name}", box=box.ROUNDED)
    table.add_column("Layer", style="cyan")
    table.add_column("Recommendation")

    sections = [
        ("Top", report.clothing.top),
        ("Bottom", report.clothing.bottom),
        ("Accessories", report.clothing.accessories),
        ("Footwear", report.clothing.footwear),
    ]
    for heading, items in sections:
        if items:
            table.add_row(heading, "\n".join(items))

    console.print(table)


def _display_checklist(report: RunReport):
    """Display checklist with priority colouring and progress."""
    progress = checklist_progress(report.checklist)

    table = Table(
        title=f"Running Checklist ({progress.completed}/{progress.total} complete)",
        box=box.ROUNDED,
    )
    table.add_column("", justify="center")
    table.add_column("Item")
    table.add_column("Priority", justify="center")
    table.add_column("ID", style="dim")

    for item in report.checklist:
        style = PRIORITY_STYLES[item.priority]
        table.add_row(
            "✅" if item.completed else "⬜",
            item.text,
            f"[{style}]{item.priority.value}[/{style}]",
            item.id,
        )

    console.print(table)

    if progress.all_complete:
        console.print("[bold green]All set - have a great run![/bold green]")
    elif progress.high_priority_incomplete:
        console.print(
            f"[yellow]{progress.high_priority_incomplete} high-priority item(s) still open[/yellow]"
        )


def _display_gear(report: RunReport):
    """Display gear suggestions."""
    if not report.gear:
        return

    console.print("\n[bold]Recommended Gear:[/bold]")
    for gear in report.gear:
        console.print(f"  • [cyan]{gear.brand} {gear.name}[/cyan] ({gear.price}) - {gear.description}")


def _display_preferences(prefs: UserPreferences):
    """Display preferences in a panel."""
    content = []
    content.append(f"Temperature unit: [cyan]{'°F' if prefs.use_fahrenheit else '°C'}[/cyan]")
    content.append(f"Dark mode: [cyan]{'on' if prefs.dark_mode else 'off'}[/cyan]")
    content.append(f"Favorite run type: [cyan]{prefs.favorite_run_type.display_name}[/cyan]")
    if prefs.favorite_cities:
        content.append("Favorite cities:")
        for city in prefs.favorite_cities:
            content.append(f"  • {city}")
    else:
        content.append("Favorite cities: [dim]none[/dim]")
    content.append(f"Completed checklist items: {len(prefs.completed_checklist_items)}")

    console.print(Panel("\n".join(content), title="Preferences", border_style="cyan"))


# ===== CLI COMMANDS =====


@app.command()
def recommend(
    observation_file: Optional[Path] = ObservationFile,
    temp: Optional[float] = TempOption,
    feels_like: Optional[float] = FeelsLikeOption,
    humidity: float = HumidityOption,
    condition: str = ConditionOption,
    wind: float = WindOption,
    night: bool = NightOption,
    uv: float = UvOption,
    run_type: Optional[RunType] = RunTypeOption,
    fahrenheit: Optional[bool] = typer.Option(
        None,
        "--fahrenheit/--celsius",
        help="Override the stored temperature unit",
    ),
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help="Path to a gear catalog JSON file",
        exists=True,
    ),
    markdown: Optional[Path] = typer.Option(
        None,
        "--markdown",
        "-m",
        help="Also write the report as Markdown to this path",
    ),
):
    """
    Show what to wear and bring for a run.

    Uses your stored run type and temperature unit unless overridden.
    """
    store = _open_store()
    prefs = store.current
    observation = _load_observation(observation_file, temp, feels_like, humidity, condition, wind, night, uv)

    try:
        gear_catalog = load_gear_catalog(catalog or Settings.from_env().gear_catalog_path)
    except (OSError, ValueError) as e:
        console.print(f"[red]✗ Failed to load gear catalog: {e}[/red]")
        raise typer.Exit(1)

    selected_run_type = run_type or prefs.favorite_run_type
    use_fahrenheit = prefs.use_fahrenheit if fahrenheit is None else fahrenheit

    report = build_report(observation, selected_run_type, prefs, gear_catalog)

    _display_weather(report, use_fahrenheit)
    _display_clothing(report)
    _display_checklist(report)
    _display_gear(report)

    if markdown:
        path = save_report_to_file(report, markdown, format="markdown", use_fahrenheit=use_fahrenheit)
        console.print(f"\n✓ Report saved: [cyan]{path}[/cyan]")


@checklist_app.command("toggle")
def toggle_checklist_item(
    item_id: str = typer.Argument(..., help="Checklist item id, e.g. 'hydration'"),
    observation_file: Optional[Path] = ObservationFile,
    temp: Optional[float] = TempOption,
    feels_like: Optional[float] = FeelsLikeOption,
    humidity: float = HumidityOption,
    condition: str = ConditionOption,
    wind: float = WindOption,
    night: bool = NightOption,
    uv: float = UvOption,
    run_type: Optional[RunType] = RunTypeOption,
):
    """
    Tick a checklist item on or off and remember it.
    """
    store = _open_store()
    prefs = store.current
    observation = _load_observation(observation_file, temp, feels_like, humidity, condition, wind, night, uv)
    report = build_report(observation, run_type or prefs.favorite_run_type, prefs)

    if find_item(report.checklist, item_id) is None:
        console.print(f"[red]✗ No checklist item '{item_id}' for these conditions[/red]")
        console.print("[yellow]Available ids:[/yellow]")
        for item in report.checklist:
            console.print(f"  • {item.id}")
        raise typer.Exit(1)

    updated, completed_ids = toggle_item(report.checklist, item_id)
    store.set_completed_items(completed_ids)

    report = report.model_copy(
        update={"checklist": updated, "progress": checklist_progress(updated)}
    )
    _display_checklist(report)


@prefs_app.command("show")
def show_preferences():
    """Show stored preferences."""
    _display_preferences(_open_store().current)


@prefs_app.command("set-unit")
def set_unit(
    unit: str = typer.Argument(..., help="'c' for Celsius or 'f' for Fahrenheit"),
):
    """Choose the temperature display unit."""
    unit = unit.lower()
    if unit not in ("c", "f"):
        console.print(f"[red]✗ Unknown unit '{unit}', use 'c' or 'f'[/red]")
        raise typer.Exit(1)

    prefs = _open_store().update(use_fahrenheit=unit == "f")
    console.print(f"✓ Temperatures shown in [cyan]{'°F' if prefs.use_fahrenheit else '°C'}[/cyan]")


@prefs_app.command("dark-mode")
def dark_mode():
    """Toggle dark mode."""
    prefs = _open_store().toggle_dark_mode()
    console.print(f"✓ Dark mode [cyan]{'on' if prefs.dark_mode else 'off'}[/cyan]")


@prefs_app.command("run-type")
def set_run_type(
    run_type: RunType = typer.Argument(..., help="easy, long, workout or recovery"),
):
    """Set the default run type."""
    prefs = _open_store().set_run_type(run_type)
    console.print(f"✓ Favorite run type: [cyan]{prefs.favorite_run_type.display_name}[/cyan]")


@prefs_app.command("add-city")
def add_city(city: str = typer.Argument(..., help="City display name, e.g. 'Boston, MA, US'")):
    """Add a city to favorites (the oldest is dropped beyond five)."""
    prefs = _open_store().add_favorite_city(city)
    _display_preferences(prefs)


@prefs_app.command("remove-city")
def remove_city(city: str = typer.Argument(..., help="City display name")):
    """Remove a city from favorites."""
    store = _open_store()
    if city not in store.current.favorite_cities:
        console.print(f"[yellow]'{city}' is not a favorite[/yellow]")
        raise typer.Exit(1)
    prefs = store.remove_favorite_city(city)
    _display_preferences(prefs)


if __name__ == "__main__":
    app()
