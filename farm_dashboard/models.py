from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class SensorKind(StrEnum):
    SOIL = "soil"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    OTHER = "other"


class StatusLabel(StrEnum):
    OPTIMAL = "Optimal"
    WARNING = "Warning"
    CRITICAL = "Critical"


class ColorKey(StrEnum):
    RED = "red"
    ORANGE = "orange"
    GREEN = "green"
    BLUE = "blue"
    CYAN = "cyan"
    GRAY = "gray"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class Reading(BaseModel):
    """Snapshot of the most recent feed entry.

    Unparsable source fields are coerced to zero and listed in
    ``invalid_fields`` so a zero caused by bad input can be told apart from a
    true zero reading.
    """

    model_config = ConfigDict(frozen=True)

    soil_moisture: float = 0.0
    temperature: float = 0.0
    humidity: float = 0.0
    pump_state: int = 0
    last_updated: datetime | None = None
    invalid_fields: tuple[str, ...] = ()

    @property
    def pump_active(self) -> bool:
        return self.pump_state == 1


class Status(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: StatusLabel
    color: ColorKey


class SystemSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    optimal: int = Field(default=0, ge=0)
    warning: int = Field(default=0, ge=0)
    critical: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.optimal + self.warning + self.critical

    @property
    def nominal(self) -> bool:
        return self.warning == 0 and self.critical == 0
