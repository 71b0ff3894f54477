import logging
import threading
import time
from collections.abc import Callable

from .models import Reading

logger = logging.getLogger(__name__)


class TelemetryPoller:
    """Fixed-rate poll task with an explicit start/stop lifecycle.

    ``start`` polls once immediately and then every ``interval_secs`` on a
    background thread. Failures are logged and counted, never raised; the next
    attempt happens at the next scheduled tick with no backoff. ``stop`` cancels
    future polls. A poll already in flight is allowed to finish, but its result
    is dropped.
    """

    def __init__(
        self,
        fetch_reading: Callable[[], Reading | None],
        on_reading: Callable[[Reading], None],
        interval_secs: float = 15.0,
        on_error: Callable[[Exception], None] | None = None,
        name: str = "telemetry-poller",
    ) -> None:
        if interval_secs <= 0:
            raise ValueError("interval_secs must be positive")
        self._fetch_reading = fetch_reading
        self._on_reading = on_reading
        self._on_error = on_error
        self._interval = float(interval_secs)
        self._name = name
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

        self.polls = 0
        self.consecutive_failures = 0
        self.last_error: Exception | None = None

    @property
    def interval_secs(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive() and not self._stop.is_set()

    def start(self) -> None:
        if self.running:
            return
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, args=(self._stop,), name=self._name, daemon=True)
        logger.info("Poller starting: interval=%ss", self._interval)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Cancel future polls; optionally wait up to ``timeout`` seconds for the thread."""
        if self._thread is None:
            return
        self._stop.set()
        thread = self._thread
        self._thread = None
        if timeout is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.info("Poller stopped after %s polls", self.polls)

    def poll_once(self, stop_event: threading.Event | None = None) -> bool:
        """Run one poll cycle. Returns True when a new Reading was delivered."""
        stop_event = stop_event or self._stop
        self.polls += 1
        try:
            reading = self._fetch_reading()
        except Exception as exc:
            self.consecutive_failures += 1
            self.last_error = exc
            logger.warning("Error fetching telemetry (%s consecutive): %s", self.consecutive_failures, exc)
            if self._on_error is not None:
                try:
                    self._on_error(exc)
                except Exception:
                    # Callback errors must not affect the loop
                    logger.debug("on_error callback error", exc_info=True)
            return False

        self.consecutive_failures = 0
        self.last_error = None
        if reading is None:
            return False
        if stop_event.is_set():
            logger.debug("Discarding reading fetched after stop")
            return False
        self._on_reading(reading)
        return True

    def _run(self, stop_event: threading.Event) -> None:
        next_at = time.monotonic()
        while not stop_event.is_set():
            self.poll_once(stop_event)
            next_at += self._interval
            now = time.monotonic()
            if next_at <= now:
                # Skip ticks missed while a slow poll was in flight
                missed = int((now - next_at) // self._interval) + 1
                next_at += missed * self._interval
            if stop_event.wait(next_at - now):
                break
