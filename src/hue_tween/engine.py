"""
Tween engine.

Pumps a named set of tweeners once per frame and reports their state
(loop counts, current blend, current value) to observers such as the
status server.
"""

from __future__ import annotations

import math
import threading
from typing import TYPE_CHECKING

from .core.errors import EmptyValueList, InvalidConfiguration, NonFiniteInput
from .tweeners import ColorTweener, PositionTweener, Tweener

if TYPE_CHECKING:
    from .config.schema import TweenConfig, TweenerConfig
    from .lights.rig import LightRig


class TweenEngine:
    """
    Drives every tweener from a single frame loop.

    update() is the only writer. Every reader takes the same lock, so the
    status server thread always sees a whole frame.

    A frame is all or nothing: update() checks every tweener before
    advancing any of them, so a bad delta or an emptied value list raises
    without moving any tweener or the frame counter.
    """

    def __init__(self):
        self._tweeners: dict[str, Tweener] = {}
        self._lock = threading.Lock()
        self.frame = 0

    def add(self, name: str, tweener: Tweener) -> None:
        """Register a tweener under a unique name."""
        with self._lock:
            if name in self._tweeners:
                raise ValueError(f"Tweener '{name}' already exists")
            self._tweeners[name] = tweener

    def get(self, name: str) -> Tweener | None:
        with self._lock:
            return self._tweeners.get(name)

    @property
    def names(self) -> list[str]:
        with self._lock:
            return list(self._tweeners.keys())

    @property
    def total_loops(self) -> int:
        """Loops completed across all tweeners."""
        with self._lock:
            return sum(t.loops for t in self._tweeners.values())

    def update(self, delta_time: float) -> dict[str, int]:
        """
        Advance every tweener by one frame.

        Args:
            delta_time: Seconds since the previous frame

        Returns:
            Names of tweeners that completed a loop this frame, mapped to
            their new loop count

        Raises:
            NonFiniteInput: If delta_time is negative, NaN or infinite
            EmptyValueList: If any tweener's values are empty; nothing
                is advanced
        """
        if not math.isfinite(delta_time) or delta_time < 0:
            raise NonFiniteInput(f"Delta time must be finite and >= 0, got {delta_time}")

        completed = {}
        with self._lock:
            for name, tweener in self._tweeners.items():
                if not tweener.values:
                    raise EmptyValueList(f"Tweener '{name}' has no values")

            for name, tweener in self._tweeners.items():
                before = tweener.loops
                tweener.update(delta_time)
                if tweener.loops != before:
                    completed[name] = tweener.loops
            self.frame += 1
        return completed

    def get_tweener_status(self, name: str) -> dict | None:
        """Status for one tweener, or None if unknown."""
        with self._lock:
            tweener = self._tweeners.get(name)
            if tweener is None:
                return None
            return {"name": name, **tweener.get_status()}

    def get_status(self) -> dict:
        """JSON-ready snapshot of all tweeners."""
        with self._lock:
            return {
                "type": "status",
                "frame": self.frame,
                "total_loops": sum(t.loops for t in self._tweeners.values()),
                "tweeners": [
                    {"name": name, **tweener.get_status()}
                    for name, tweener in self._tweeners.items()
                ],
            }

    @classmethod
    def from_config(cls, config: TweenConfig, rig: LightRig) -> "TweenEngine":
        """
        Build an engine with one tweener per config entry.

        Raises:
            InvalidConfiguration: If a tweener cannot be built
        """
        engine = cls()
        for tweener_config in config.tweeners:
            engine.add(tweener_config.name, build_tweener(tweener_config, rig))
        return engine


def build_tweener(config: TweenerConfig, rig: LightRig) -> Tweener:
    """Create the tweener described by a config entry."""
    try:
        if config.kind == "color":
            return ColorTweener(
                rig,
                config.light_id,
                config.values,
                segment_duration=config.segment_duration,
                strict_boundary=config.strict_boundary,
            )
        if config.kind == "position":
            return PositionTweener(
                config.values,
                initial_position=config.initial,
                segment_duration=config.segment_duration,
                strict_boundary=config.strict_boundary,
            )
    except (TypeError, ValueError) as e:
        raise InvalidConfiguration(f"Tweener '{config.name}': {e}") from e
    raise InvalidConfiguration(f"Tweener '{config.name}': unknown kind '{config.kind}'")
