"""Threshold classification of sensor values and the derived system summary."""

from collections.abc import Iterable
from datetime import datetime
from typing import Final, NamedTuple

from .models import ColorKey, Reading, SensorKind, Status, StatusLabel, SystemSummary


class Band(NamedTuple):
    """Accepted range ``[low, high]``; only values strictly outside it match."""

    low: float | None
    high: float | None

    def outside(self, value: float) -> bool:
        if self.low is not None and value < self.low:
            return True
        return self.high is not None and value > self.high


class Thresholds(NamedTuple):
    critical: Band
    warning: Band


THRESHOLDS: Final[dict[SensorKind, Thresholds]] = {
    SensorKind.SOIL: Thresholds(critical=Band(30.0, None), warning=Band(40.0, None)),
    SensorKind.TEMPERATURE: Thresholds(critical=Band(15.0, 35.0), warning=Band(20.0, 30.0)),
    SensorKind.HUMIDITY: Thresholds(critical=Band(25.0, 90.0), warning=Band(35.0, 80.0)),
}

COLORS: Final[dict[SensorKind, dict[StatusLabel, ColorKey]]] = {
    SensorKind.SOIL: {
        StatusLabel.CRITICAL: ColorKey.RED,
        StatusLabel.WARNING: ColorKey.ORANGE,
        StatusLabel.OPTIMAL: ColorKey.GREEN,
    },
    SensorKind.TEMPERATURE: {
        StatusLabel.CRITICAL: ColorKey.RED,
        StatusLabel.WARNING: ColorKey.ORANGE,
        StatusLabel.OPTIMAL: ColorKey.BLUE,
    },
    SensorKind.HUMIDITY: {
        StatusLabel.CRITICAL: ColorKey.CYAN,
        StatusLabel.WARNING: ColorKey.ORANGE,
        StatusLabel.OPTIMAL: ColorKey.CYAN,
    },
    SensorKind.OTHER: {StatusLabel.OPTIMAL: ColorKey.GRAY},
}

# Short names accepted in addition to the enum values
_ALIASES: Final[dict[str, SensorKind]] = {"temp": SensorKind.TEMPERATURE}

NOMINAL_BANNER: Final[str] = "All Systems Nominal"
ACTION_BANNER: Final[str] = "Action Recommended"


def sensor_kind(kind: SensorKind | str) -> SensorKind:
    """Normalize ``kind``; anything unrecognized maps to ``SensorKind.OTHER``."""
    if isinstance(kind, SensorKind):
        return kind
    key = str(kind).strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return SensorKind(key)
    except ValueError:
        return SensorKind.OTHER


def classify(kind: SensorKind | str, value: float) -> Status:
    """Classify ``value`` for the given sensor kind.

    The critical check runs before the warning check; the first match wins.
    Unrecognized kinds are always Optimal.
    """
    resolved = sensor_kind(kind)
    colors = COLORS[resolved]
    thresholds = THRESHOLDS.get(resolved)

    label = StatusLabel.OPTIMAL
    if thresholds is not None:
        if thresholds.critical.outside(value):
            label = StatusLabel.CRITICAL
        elif thresholds.warning.outside(value):
            label = StatusLabel.WARNING
    return Status(label=label, color=colors[label])


def summarize(labels: Iterable[StatusLabel]) -> SystemSummary:
    counts = {label: 0 for label in StatusLabel}
    for label in labels:
        counts[StatusLabel(label)] += 1
    return SystemSummary(
        optimal=counts[StatusLabel.OPTIMAL],
        warning=counts[StatusLabel.WARNING],
        critical=counts[StatusLabel.CRITICAL],
    )


def summarize_reading(reading: Reading) -> SystemSummary:
    """Summary over soil, humidity and temperature. Pump state is not counted."""
    return summarize(
        [
            classify(SensorKind.SOIL, reading.soil_moisture).label,
            classify(SensorKind.HUMIDITY, reading.humidity).label,
            classify(SensorKind.TEMPERATURE, reading.temperature).label,
        ]
    )


def banner_text(summary: SystemSummary) -> str:
    return NOMINAL_BANNER if summary.nominal else ACTION_BANNER


def greeting(moment: datetime | int) -> str:
    hour = moment.hour if isinstance(moment, datetime) else int(moment)
    if hour < 12:
        return "Good Morning"
    if hour < 18:
        return "Good Afternoon"
    return "Good Evening"
