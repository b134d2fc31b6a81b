"""
Color tweener.

Interpolates one light's color by looping through a list of colors.
"""

from ..color import hsv_to_hex, lerp_hsv, resolve_color
from ..core.stepper import DEFAULT_SEGMENT_DURATION
from ..core.types import HSV
from ..lights.rig import LightRig
from .base import Tweener


class ColorTweener(Tweener):
    """
    Tweens a light on a LightRig.

    The light's color at construction time is captured as the initial
    value, so the first segment fades from whatever the light was showing.
    """

    kind = "color"

    def __init__(
        self,
        rig: LightRig,
        light_id: int,
        values: list[HSV | str],
        segment_duration: float = DEFAULT_SEGMENT_DURATION,
        strict_boundary: bool = False,
    ):
        self.rig = rig
        self.light_id = light_id
        super().__init__(
            values=[resolve_color(v) for v in values],
            initial_value=rig.get_light_color(light_id),
            blend=lerp_hsv,
            segment_duration=segment_duration,
            apply=self._apply,
            strict_boundary=strict_boundary,
        )

    def _apply(self, color: HSV) -> None:
        self.rig.set_light_color(self.light_id, color)

    def encode_value(self, value: HSV) -> dict:
        return {
            "light_id": self.light_id,
            "hsv": list(value),
            "hex": hsv_to_hex(value),
        }
