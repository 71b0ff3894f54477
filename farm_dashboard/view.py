from datetime import datetime, tzinfo
from typing import Final, NamedTuple

from pydantic import BaseModel, ConfigDict

from .models import Reading, SensorKind, Status, StatusLabel, SystemSummary, Theme
from .readings import FIELD_HUMIDITY, FIELD_SOIL_MOISTURE, FIELD_TEMPERATURE
from .state import DashboardState
from .status import banner_text, classify, greeting, summarize_reading


class CardSpec(NamedTuple):
    kind: SensorKind
    title: str
    unit: str
    attr: str
    source_field: str


CARD_SPECS: Final[tuple[CardSpec, ...]] = (
    CardSpec(SensorKind.SOIL, "Soil Moisture", "%", "soil_moisture", FIELD_SOIL_MOISTURE),
    CardSpec(SensorKind.HUMIDITY, "Humidity", "%", "humidity", FIELD_HUMIDITY),
    CardSpec(SensorKind.TEMPERATURE, "Temperature", "°C", "temperature", FIELD_TEMPERATURE),
)

NOT_AVAILABLE: Final[str] = "N/A"


class SensorCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: SensorKind
    title: str
    value: float
    unit: str
    status: Status
    invalid: bool = False

    @property
    def value_text(self) -> str:
        return f"{self.value:.1f}"

    @property
    def alert(self) -> bool:
        return self.status.label != StatusLabel.OPTIMAL


class DashboardView(BaseModel):
    """Everything the page shows, derived from one state snapshot."""

    model_config = ConfigDict(frozen=True)

    theme: Theme
    greeting: str
    clock_text: str
    last_updated_text: str
    pump_active: bool
    pump_text: str
    cards: tuple[SensorCard, ...]
    summary: SystemSummary
    banner: str
    location_label: str = ""
    operator_label: str = ""


def format_time(moment: datetime, with_seconds: bool = False) -> str:
    """12-hour clock text such as ``09:05 AM`` or ``09:05:07 PM``."""
    return moment.strftime("%I:%M:%S %p" if with_seconds else "%I:%M %p")


def format_last_updated(reading: Reading, tz: tzinfo | None = None) -> str:
    if reading.last_updated is None:
        return NOT_AVAILABLE
    # Aware timestamps are shown in ``tz``, or the local zone when tz is None
    return format_time(reading.last_updated.astimezone(tz))


def sensor_cards(reading: Reading) -> tuple[SensorCard, ...]:
    cards = []
    for spec in CARD_SPECS:
        value = float(getattr(reading, spec.attr))
        cards.append(
            SensorCard(
                kind=spec.kind,
                title=spec.title,
                value=value,
                unit=spec.unit,
                status=classify(spec.kind, value),
                invalid=spec.source_field in reading.invalid_fields,
            )
        )
    return tuple(cards)


def build_view(
    state: DashboardState,
    location_label: str = "",
    operator_label: str = "",
    tz: tzinfo | None = None,
) -> DashboardView:
    reading = state.reading
    now = state.now.astimezone(tz) if tz is not None else state.now
    cards = sensor_cards(reading)
    summary = summarize_reading(reading)
    return DashboardView(
        theme=state.theme,
        greeting=greeting(now),
        clock_text=format_time(now, with_seconds=True),
        last_updated_text=format_last_updated(reading, tz=tz),
        pump_active=reading.pump_active,
        pump_text="ACTIVE" if reading.pump_active else "INACTIVE",
        cards=cards,
        summary=summary,
        banner=banner_text(summary),
        location_label=location_label,
        operator_label=operator_label,
    )
