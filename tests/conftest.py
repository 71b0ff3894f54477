import os
from collections.abc import Callable
from typing import Any

import pytest

from .utils import FakeResponse

# Environment read by farm_dashboard.config.load_settings
os.environ.setdefault("THINGSPEAK_CHANNEL_ID", "3066267")
os.environ.setdefault("THINGSPEAK_READ_API_KEY", "TESTKEY")
os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest.fixture
def feed_response() -> Callable[..., FakeResponse]:
    def _make(*entries: dict[str, Any], status_code: int = 200) -> FakeResponse:
        return FakeResponse(
            status_code=status_code,
            payload={"channel": {"id": 3066267, "name": "Smart Farm"}, "feeds": list(entries)},
        )

    return _make
