"""Tests for the frame clock."""

import pytest

import hue_tween.clock as clock_module
from hue_tween.clock import FrameClock


class FakeTime:
    def __init__(self):
        self.now = 100.0
        self.slept: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_time(monkeypatch):
    fake = FakeTime()
    monkeypatch.setattr(clock_module, "time", fake)
    return fake


def test_tick_returns_delta(fake_time):
    clock = FrameClock(fps=20)

    fake_time.now += 0.05
    assert clock.tick() == pytest.approx(0.05)
    fake_time.now += 0.2
    assert clock.tick() == pytest.approx(0.2)
    assert clock.frame == 2


def test_sleep_fills_rest_of_frame(fake_time):
    clock = FrameClock(fps=10)
    clock.tick()
    fake_time.now += 0.03

    clock.sleep_until_next_frame()

    assert fake_time.slept == [pytest.approx(0.07)]


def test_no_sleep_when_frame_overran(fake_time):
    clock = FrameClock(fps=10)
    clock.tick()
    fake_time.now += 0.5

    clock.sleep_until_next_frame()

    assert fake_time.slept == []


def test_reset_drops_paused_time(fake_time):
    clock = FrameClock(fps=25)
    fake_time.now += 30.0

    clock.reset()
    fake_time.now += 0.04

    assert clock.tick() == pytest.approx(0.04)


def test_invalid_fps():
    with pytest.raises(ValueError):
        FrameClock(fps=0)
