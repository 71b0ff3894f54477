import logging
from typing import Any

import requests  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)


class ThingSpeakError(RuntimeError):
    """Raised when the feed endpoint answers with an error status or an unusable body."""


class ThingSpeakClient:
    """Read-only client for a single ThingSpeak channel feed.

    Channel id and read key are supplied at construction time; the key is sent
    as the ``api_key`` query parameter on every request.
    """

    BASE_URL = "https://api.thingspeak.com"

    def __init__(
        self,
        channel_id: str,
        read_api_key: str,
        base_url: str | None = None,
        user_agent: str = "farm-dashboard/1.0",
        timeout: float = 10.0,
    ) -> None:
        self.channel_id = channel_id
        self.read_api_key = read_api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    @property
    def feeds_url(self) -> str:
        return f"{self.base_url}/channels/{self.channel_id}/feeds.json"

    def get_latest_feed(self, results: int = 1) -> dict[str, Any]:
        """Fetch the channel document holding the ``results`` most recent entries."""
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        params = {"api_key": self.read_api_key, "results": results}
        resp = requests.get(self.feeds_url, headers=headers, params=params, timeout=self.timeout)
        logger.debug("thingspeak feed response: status=%s", resp.status_code)
        if not (200 <= resp.status_code < 300):
            raise ThingSpeakError(f"ThingSpeak feed fetch failed: {resp.status_code}")
        try:
            payload = resp.json()
        except ValueError as exc:
            raise ThingSpeakError("ThingSpeak feed response is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise ThingSpeakError(f"ThingSpeak feed response has unexpected type: {type(payload).__name__}")
        return payload
