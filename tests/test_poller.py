import threading

import pytest
import requests  # type: ignore[import-untyped]

from farm_dashboard.models import Reading
from farm_dashboard.poller import TelemetryPoller


def _reading(soil: float = 55.0) -> Reading:
    return Reading(soil_moisture=soil, temperature=24.0, humidity=60.0)


def test_poll_once_delivers_reading() -> None:
    delivered: list[Reading] = []
    poller = TelemetryPoller(fetch_reading=lambda: _reading(), on_reading=delivered.append)

    assert poller.poll_once() is True
    assert delivered == [_reading()]
    assert poller.polls == 1
    assert poller.consecutive_failures == 0


def test_poll_once_with_empty_result_changes_nothing() -> None:
    delivered: list[Reading] = []
    poller = TelemetryPoller(fetch_reading=lambda: None, on_reading=delivered.append)

    assert poller.poll_once() is False
    assert delivered == []
    assert poller.consecutive_failures == 0


def test_poll_once_swallows_and_counts_failures(caplog: pytest.LogCaptureFixture) -> None:
    errors: list[Exception] = []

    def fetch() -> Reading:
        raise requests.ConnectionError("network down")

    poller = TelemetryPoller(fetch_reading=fetch, on_reading=lambda _r: None, on_error=errors.append)

    assert poller.poll_once() is False
    assert poller.poll_once() is False
    assert poller.consecutive_failures == 2
    assert isinstance(poller.last_error, requests.ConnectionError)
    assert len(errors) == 2
    assert "2 consecutive" in caplog.text


def test_success_resets_failure_count() -> None:
    outcomes = iter([RuntimeError("boom"), _reading()])

    def fetch() -> Reading:
        item = next(outcomes)
        if isinstance(item, Exception):
            raise item
        return item

    poller = TelemetryPoller(fetch_reading=fetch, on_reading=lambda _r: None)
    poller.poll_once()
    assert poller.consecutive_failures == 1
    poller.poll_once()
    assert poller.consecutive_failures == 0
    assert poller.last_error is None


def test_error_callback_failures_do_not_escape() -> None:
    def bad_callback(_exc: Exception) -> None:
        raise ValueError("callback broke")

    def fetch() -> Reading:
        raise RuntimeError("boom")

    poller = TelemetryPoller(fetch_reading=fetch, on_reading=lambda _r: None, on_error=bad_callback)
    assert poller.poll_once() is False


def test_result_is_discarded_after_stop() -> None:
    delivered: list[Reading] = []
    stop_event = threading.Event()
    stop_event.set()
    poller = TelemetryPoller(fetch_reading=lambda: _reading(), on_reading=delivered.append)

    assert poller.poll_once(stop_event) is False
    assert delivered == []


def test_start_polls_immediately_and_stop_cancels() -> None:
    first = threading.Event()
    delivered: list[Reading] = []

    def on_reading(reading: Reading) -> None:
        delivered.append(reading)
        first.set()

    # Long interval: only the immediate startup poll can happen within the test
    poller = TelemetryPoller(fetch_reading=lambda: _reading(), on_reading=on_reading, interval_secs=3600)
    poller.start()
    try:
        assert first.wait(5), "startup poll did not run"
        assert poller.running is True
        # A second start is a no-op while running
        poller.start()
    finally:
        poller.stop(timeout=5)

    assert poller.running is False
    assert len(delivered) == 1


def test_polls_repeat_at_interval_despite_failures() -> None:
    calls: list[int] = []
    done = threading.Event()

    def fetch() -> Reading:
        calls.append(1)
        if len(calls) >= 3:
            done.set()
        raise RuntimeError("still down")

    poller = TelemetryPoller(fetch_reading=fetch, on_reading=lambda _r: None, interval_secs=0.01)
    poller.start()
    try:
        assert done.wait(5)
    finally:
        poller.stop(timeout=5)

    assert poller.consecutive_failures >= 3


def test_stop_without_start_is_noop() -> None:
    poller = TelemetryPoller(fetch_reading=lambda: None, on_reading=lambda _r: None)
    poller.stop()
    assert poller.running is False


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TelemetryPoller(fetch_reading=lambda: None, on_reading=lambda _r: None, interval_secs=0)
