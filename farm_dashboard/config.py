import os
from enum import StrEnum
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .models import Theme


class LogLevel(StrEnum):
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class Settings(BaseModel):
    channel_id: str = Field(min_length=1, validation_alias="THINGSPEAK_CHANNEL_ID")
    read_api_key: str = Field(min_length=1, validation_alias="THINGSPEAK_READ_API_KEY")
    base_url: str = Field(default="https://api.thingspeak.com", validation_alias="THINGSPEAK_BASE_URL")
    user_agent: str = Field(default="farm-dashboard/1.0", validation_alias="USER_AGENT")
    request_timeout_secs: float = Field(default=10.0, gt=0, validation_alias="REQUEST_TIMEOUT_SECS")

    poll_interval_secs: int = Field(default=15, ge=1, validation_alias="POLL_INTERVAL_SECS")
    clock_tick_secs: int = Field(default=1, ge=1, validation_alias="CLOCK_TICK_SECS")

    default_theme: Theme = Field(default=Theme.DARK, validation_alias="DEFAULT_THEME")
    # Footer labels
    location_label: str = Field(default="Nashik, Maharashtra", validation_alias="LOCATION_LABEL")
    operator_label: str = Field(default="", validation_alias="OPERATOR_LABEL")

    log_level: LogLevel = Field(default=LogLevel.INFO, validation_alias="LOG_LEVEL")


ENV_KEYS: Final[tuple[str, ...]] = (
    "THINGSPEAK_CHANNEL_ID",
    "THINGSPEAK_READ_API_KEY",
    "THINGSPEAK_BASE_URL",
    "USER_AGENT",
    "REQUEST_TIMEOUT_SECS",
    "POLL_INTERVAL_SECS",
    "CLOCK_TICK_SECS",
    "DEFAULT_THEME",
    "LOCATION_LABEL",
    "OPERATOR_LABEL",
    "LOG_LEVEL",
)

REQUIRED_KEYS: Final[tuple[str, ...]] = ("THINGSPEAK_CHANNEL_ID", "THINGSPEAK_READ_API_KEY")


def load_settings() -> Settings:
    # Load .env if present (does nothing if file missing)
    load_dotenv()
    data: dict[str, str] = {}
    for key in ENV_KEYS:
        if key in os.environ:
            data[key] = os.environ[key]

    # Accept lower/mixed case for enum-valued keys
    if "DEFAULT_THEME" in data:
        data["DEFAULT_THEME"] = data["DEFAULT_THEME"].strip().lower()
    if "LOG_LEVEL" in data:
        data["LOG_LEVEL"] = data["LOG_LEVEL"].strip().upper()

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        missing = [k for k in REQUIRED_KEYS if not data.get(k)]
        if missing:
            raise RuntimeError(f"Missing required configuration: {', '.join(missing)}") from e
        raise
