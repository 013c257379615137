"""
Tests for run report assembly and export.
"""

import json
from pathlib import Path

import pytest

from runweather.clothing import recommend
from runweather.gear import load_gear_catalog
from runweather.insight import COMFORTABLE_MESSAGE
from runweather.observation import observation_from_openweather
from runweather.report import build_report, report_to_markdown, save_report_to_file
from runweather.schemas import RunType, UserPreferences


@pytest.fixture
def rain_evening():
    """Boston, 7°C feeling like 4.2°C, light rain and wind after sunset."""
    with open(Path("tests/fixtures/openweather_rain_evening.json")) as f:
        payload = json.load(f)
    return observation_from_openweather(payload, now=payload["dt"])


@pytest.fixture
def report(rain_evening):
    return build_report(rain_evening, RunType.LONG)


def test_report_clothing_matches_recommend(rain_evening, report):
    expected = recommend(4.2, "Rain", 6.2, 88.0, True, RunType.LONG)
    assert report.clothing == expected
    assert report.clothing.accessories == [
        "Waterproof jacket",
        "Hat with brim",
        "Water-resistant gloves",
        "Light gloves",
        "Beanie or headband",
        "Wind-resistant gloves",
        "Ear protection",
        "Reflective vest",
        "LED lights",
        "Headlamp",
    ]


def test_report_checklist(report):
    assert [item.id for item in report.checklist] == [
        "fuel",
        "visibility",
        "hydration",
        "warmup",
        "rain-prep",
        "route",
        "logistics",
    ]
    assert report.progress.completed == 0
    assert report.progress.total == 7
    assert report.progress.high_priority_incomplete == 2


def test_report_gear_and_insight(report):
    assert [g.id for g in report.gear] == [
        "patagonia-houdini",
        "smartwool-gloves",
        "brooks-ghost-15",
    ]
    assert report.insight == COMFORTABLE_MESSAGE


def test_report_applies_saved_progress(rain_evening):
    prefs = UserPreferences(completed_checklist_items=["hydration", "fuel", "heat-prep"])
    report = build_report(rain_evening, RunType.LONG, prefs)

    assert [i.id for i in report.checklist if i.completed] == ["fuel", "hydration"]
    assert report.progress.completed == 2
    assert report.progress.high_priority_incomplete == 1


def test_report_with_custom_catalog(rain_evening, tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{
        "id": "headlamp",
        "name": "Headlamp",
        "brand": "Petzl",
        "price": "$40",
        "description": "Bright and light",
        "conditions": ["night"],
    }]))

    report = build_report(rain_evening, RunType.EASY, catalog=load_gear_catalog(path))
    assert [g.id for g in report.gear] == ["headlamp"]


def test_markdown_fahrenheit(report):
    md = report_to_markdown(report, use_fahrenheit=True)

    assert md.startswith("# Running Weather: Boston")
    assert "**Run Type:** Long Run" in md
    assert "**Temperature:** 45°F (feels like 40°F)" in md
    assert "**Conditions:** light rain" in md
    assert "**Wind:** 14 mph" in md
    assert f"> {COMFORTABLE_MESSAGE}" in md
    assert "- [ ] Fuel strategy planned (gels, snacks) **(high)**" in md
    assert "**Progress:** 0/7 complete" in md
    assert "## Recommended Gear" in md


def test_markdown_celsius_and_completed(rain_evening):
    prefs = UserPreferences(completed_checklist_items=["hydration"])
    md = report_to_markdown(build_report(rain_evening, RunType.LONG, prefs), use_fahrenheit=False)

    assert "**Temperature:** 7°C (feels like 4°C)" in md
    assert "**Wind:** 6 m/s" in md
    assert "- [x] Pre-hydrate (16-20oz water)" in md
    assert "**Progress:** 1/7 complete" in md


def test_save_markdown(report, tmp_path):
    path = save_report_to_file(report, tmp_path / "out" / "report.md")
    assert path.exists()
    assert path.read_text(encoding="utf-8").startswith("# Running Weather")


def test_save_json(report, tmp_path):
    path = save_report_to_file(report, tmp_path / "report.json", format="json")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["run_type"] == "long"
    assert data["observation"]["location_name"] == "Boston"
    assert len(data["checklist"]) == 7


def test_save_unknown_format(report, tmp_path):
    with pytest.raises(ValueError, match="Unsupported format"):
        save_report_to_file(report, tmp_path / "report.txt", format="pdf")


def test_unknown_format_creates_no_directories(report, tmp_path):
    target = tmp_path / "new" / "dir" / "report.pdf"

    with pytest.raises(ValueError):
        save_report_to_file(report, target, format="pdf")

    assert not (tmp_path / "new").exists()
