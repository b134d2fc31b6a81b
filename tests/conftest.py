"""Shared pytest fixtures for hue-tween tests."""

from pathlib import Path

import pytest

from hue_tween.core.types import HSV
from hue_tween.lights.rig import LightRig


@pytest.fixture
def rig() -> LightRig:
    """Six-light rig with light 0 showing red."""
    rig = LightRig(num_lights=6)
    rig.set_light_color(0, HSV(0.0, 1.0, 1.0))
    return rig


@pytest.fixture
def write_config(tmp_path: Path):
    """Write YAML text to a config file and return its path."""
    def _write(text: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(text)
        return path
    return _write


class FakeClock:
    """Frame clock stand-in that reports a fixed delta and never sleeps."""

    def __init__(self, delta: float):
        self.delta = delta
        self.frame = 0

    def tick(self) -> float:
        self.frame += 1
        return self.delta

    def sleep_until_next_frame(self) -> None:
        pass

    def reset(self) -> None:
        pass


@pytest.fixture
def fake_clock():
    return FakeClock
