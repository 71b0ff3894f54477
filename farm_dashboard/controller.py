"""Dashboard controller: owns the session state and the telemetry poller."""

import logging
import weakref
from collections.abc import Callable
from datetime import datetime, tzinfo

from .config import Settings
from .models import Reading, Theme
from .poller import TelemetryPoller
from .readings import latest_entry, reading_from_entry
from .state import DashboardState
from .thingspeak_client import ThingSpeakClient
from .view import DashboardView, build_view

logger = logging.getLogger(__name__)


def make_fetch_reading(client: ThingSpeakClient) -> Callable[[], Reading | None]:
    """Return a callable that fetches and parses the latest feed entry.

    The callable returns None when the channel has no entries; transport and
    payload errors propagate to the caller.
    """

    def fetch_reading() -> Reading | None:
        payload = client.get_latest_feed(results=1)
        entry = latest_entry(payload)
        if entry is None:
            return None
        return reading_from_entry(entry)

    return fetch_reading


class DashboardController:
    def __init__(
        self,
        poller_factory: Callable[[Callable[[Reading], None]], TelemetryPoller],
        theme: Theme = Theme.DARK,
        location_label: str = "",
        operator_label: str = "",
        tz: tzinfo | None = None,
    ) -> None:
        self.state = DashboardState(theme=theme)
        self.location_label = location_label
        self.operator_label = operator_label
        self.tz = tz
        # The poller must not reference the controller; mount() relies on it
        # being collectable to stop polling.
        self.poller: TelemetryPoller = poller_factory(self.state.replace_reading)
        self._finalizer: weakref.finalize | None = None

    @classmethod
    def from_settings(cls, settings: Settings, tz: tzinfo | None = None) -> "DashboardController":
        client = ThingSpeakClient(
            channel_id=settings.channel_id,
            read_api_key=settings.read_api_key,
            base_url=settings.base_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout_secs,
        )
        fetch_reading = make_fetch_reading(client)

        def poller_factory(on_reading: Callable[[Reading], None]) -> TelemetryPoller:
            return TelemetryPoller(
                fetch_reading=fetch_reading,
                on_reading=on_reading,
                interval_secs=settings.poll_interval_secs,
            )

        return cls(
            poller_factory,
            theme=settings.default_theme,
            location_label=settings.location_label,
            operator_label=settings.operator_label,
            tz=tz,
        )

    @property
    def mounted(self) -> bool:
        return self._finalizer is not None and self._finalizer.alive

    def mount(self) -> None:
        """Start polling. Calling mount on a mounted controller is a no-op."""
        if self.mounted:
            return
        self.poller.start()
        self._finalizer = weakref.finalize(self, self.poller.stop)
        logger.info("Dashboard mounted")

    def unmount(self) -> None:
        if self._finalizer is None:
            return
        # Calling the finalizer runs poller.stop exactly once
        self._finalizer()
        self._finalizer = None
        logger.info("Dashboard unmounted")

    def tick(self, now: datetime | None = None) -> datetime:
        return self.state.tick(now)

    def toggle_theme(self) -> Theme:
        theme = self.state.toggle_theme()
        logger.debug("Theme switched to %s", theme)
        return theme

    def view(self) -> DashboardView:
        return build_view(
            self.state,
            location_label=self.location_label,
            operator_label=self.operator_label,
            tz=self.tz,
        )
