"""
Position tweener.

Interpolates a 3D position by looping through a list of points.
"""

from typing import Callable, Sequence

from ..core.errors import InvalidConfiguration
from ..core.stepper import DEFAULT_SEGMENT_DURATION
from ..core.types import Vec3
from .base import Tweener


def to_vec3(value: Vec3 | Sequence[float]) -> Vec3:
    """Coerce an [x, y, z] sequence into a Vec3."""
    if isinstance(value, Vec3):
        return value
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise InvalidConfiguration(f"Position must have 3 components, got {value!r}")
    try:
        return Vec3(*(float(c) for c in value))
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"Position components must be numbers, got {value!r}")


def lerp_vec3(a: Vec3, b: Vec3, t: float) -> Vec3:
    return a.lerp(b, t)


class PositionTweener(Tweener):
    """Tweens a point, starting from the host's current position."""

    kind = "position"

    def __init__(
        self,
        values: list[Vec3 | Sequence[float]],
        initial_position: Vec3 | Sequence[float] = Vec3(),
        segment_duration: float = DEFAULT_SEGMENT_DURATION,
        apply: Callable[[Vec3], None] | None = None,
        strict_boundary: bool = False,
    ):
        super().__init__(
            values=[to_vec3(v) for v in values],
            initial_value=to_vec3(initial_position),
            blend=lerp_vec3,
            segment_duration=segment_duration,
            apply=apply,
            strict_boundary=strict_boundary,
        )

    def encode_value(self, value: Vec3) -> list[float]:
        return list(value)
