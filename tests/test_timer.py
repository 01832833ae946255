import pytest

from app.errors import InvalidDurationError
from app.timer import Countdown


def test_counts_down_and_expires_once():
    ticks, expired = [], []
    c = Countdown(3)
    c.start(3, on_expire=lambda: expired.append(True), on_tick=ticks.append)
    for _ in range(5):
        c.tick()
    assert ticks == [2, 1, 0]
    assert expired == [True]
    assert c.remaining == 0
    assert not c.running


def test_stop_cancels_pending_callbacks():
    ticks, expired = [], []
    c = Countdown(2)
    c.start(2, on_expire=lambda: expired.append(True), on_tick=ticks.append)
    c.tick()
    c.stop()
    c.tick()
    c.tick()
    assert ticks == [1]
    assert expired == []


def test_restart_replaces_previous_run():
    first, second = [], []
    c = Countdown(2)
    c.start(2, on_expire=lambda: first.append(True))
    c.tick()
    c.start(2, on_expire=lambda: second.append(True))
    assert c.remaining == 2
    c.tick()
    c.tick()
    assert first == []
    assert second == [True]


def test_set_duration_while_stopped_resets_remaining():
    c = Countdown(30)
    c.set_duration(60)
    assert c.remaining == 60
    assert not c.running


def test_set_duration_ignored_while_running():
    c = Countdown(30)
    c.start(30, on_expire=lambda: None)
    c.tick()
    c.set_duration(60)
    assert c.remaining == 29
    assert c.duration == 30


def test_stopping_from_tick_callback_suppresses_expiry():
    expired = []
    c = Countdown(1)
    c.start(1, on_expire=lambda: expired.append(True), on_tick=lambda _: c.stop())
    c.tick()
    assert expired == []


@pytest.mark.parametrize("bad", [0, -1, 1.5, True, "30"])
def test_invalid_duration(bad):
    with pytest.raises(InvalidDurationError):
        Countdown(bad)
