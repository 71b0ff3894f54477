import itertools
from datetime import datetime

import pytest

from farm_dashboard.models import ColorKey, Reading, SensorKind, StatusLabel
from farm_dashboard.status import banner_text, classify, greeting, summarize, summarize_reading


@pytest.mark.parametrize(
    ("kind", "value", "expected"),
    [
        (SensorKind.SOIL, 29.9, StatusLabel.CRITICAL),
        (SensorKind.SOIL, 30.0, StatusLabel.WARNING),
        (SensorKind.SOIL, 39.9, StatusLabel.WARNING),
        (SensorKind.SOIL, 40.0, StatusLabel.OPTIMAL),
        (SensorKind.SOIL, 0.0, StatusLabel.CRITICAL),
        (SensorKind.TEMPERATURE, 14.9, StatusLabel.CRITICAL),
        (SensorKind.TEMPERATURE, 15.0, StatusLabel.WARNING),
        (SensorKind.TEMPERATURE, 20.0, StatusLabel.OPTIMAL),
        (SensorKind.TEMPERATURE, 30.0, StatusLabel.OPTIMAL),
        (SensorKind.TEMPERATURE, 30.1, StatusLabel.WARNING),
        (SensorKind.TEMPERATURE, 35.0, StatusLabel.WARNING),
        (SensorKind.TEMPERATURE, 35.1, StatusLabel.CRITICAL),
        (SensorKind.HUMIDITY, 24.9, StatusLabel.CRITICAL),
        (SensorKind.HUMIDITY, 25.0, StatusLabel.WARNING),
        (SensorKind.HUMIDITY, 50.0, StatusLabel.OPTIMAL),
        (SensorKind.HUMIDITY, 80.0, StatusLabel.OPTIMAL),
        (SensorKind.HUMIDITY, 90.0, StatusLabel.WARNING),
        (SensorKind.HUMIDITY, 90.1, StatusLabel.CRITICAL),
    ],
)
def test_threshold_boundaries(kind: SensorKind, value: float, expected: StatusLabel) -> None:
    assert classify(kind, value).label == expected


def test_colors_follow_kind_and_label() -> None:
    assert classify("soil", 10).color == ColorKey.RED
    assert classify("soil", 35).color == ColorKey.ORANGE
    assert classify("soil", 60).color == ColorKey.GREEN
    assert classify("temperature", 25).color == ColorKey.BLUE
    assert classify("humidity", 10).color == ColorKey.CYAN
    assert classify("humidity", 85).color == ColorKey.ORANGE


@pytest.mark.parametrize("kind", ["other", "pump", "", "SOILX", SensorKind.OTHER])
@pytest.mark.parametrize("value", [-1000.0, 0.0, 50.0, 1e9])
def test_unrecognized_kind_is_always_optimal(kind: str, value: float) -> None:
    status = classify(kind, value)
    assert status.label == StatusLabel.OPTIMAL
    assert status.color == ColorKey.GRAY


def test_string_kinds_and_temp_alias() -> None:
    assert classify("Soil", 10).label == StatusLabel.CRITICAL
    assert classify("temp", 40).label == StatusLabel.CRITICAL
    assert classify("temp", 22).label == StatusLabel.OPTIMAL


def test_summary_counts_sum_to_three() -> None:
    for combo in itertools.product(list(StatusLabel), repeat=3):
        summary = summarize(combo)
        assert summary.total == 3
        assert summary.critical == combo.count(StatusLabel.CRITICAL)


def test_summary_of_reading_excludes_pump() -> None:
    reading = Reading(soil_moisture=25.0, temperature=22.0, humidity=50.0, pump_state=1)
    summary = summarize_reading(reading)
    assert (summary.optimal, summary.warning, summary.critical) == (2, 0, 1)
    assert banner_text(summary) == "Action Recommended"


def test_banner_nominal_only_without_warnings_or_criticals() -> None:
    assert banner_text(summarize([StatusLabel.OPTIMAL] * 3)) == "All Systems Nominal"
    assert banner_text(summarize([StatusLabel.OPTIMAL, StatusLabel.OPTIMAL, StatusLabel.WARNING])) == (
        "Action Recommended"
    )


def test_default_reading_summary() -> None:
    # Zeros: soil critical, temperature critical, humidity critical
    summary = summarize_reading(Reading())
    assert summary.critical == 3


@pytest.mark.parametrize(
    ("hour", "expected"),
    [(0, "Good Morning"), (11, "Good Morning"), (12, "Good Afternoon"), (17, "Good Afternoon"), (18, "Good Evening"), (23, "Good Evening")],
)
def test_greeting(hour: int, expected: str) -> None:
    assert greeting(hour) == expected
    assert greeting(datetime(2024, 1, 1, hour, 30)) == expected
