"""
Value types that tweeners interpolate.

- HSV: Color in hue/saturation/value space
- RGB: 8-bit color, what the lights ultimately receive
- Vec3: A point in 3D space
"""

from dataclasses import dataclass
from typing import NamedTuple
import colorsys


class HSV(NamedTuple):
    """
    HSV color representation.

    All values are in the range 0.0-1.0:
    - hue: Color wheel position (0=red, 0.33=green, 0.67=blue)
    - saturation: Color intensity (0=gray, 1=vivid)
    - value: Brightness (0=black, 1=full)
    """
    hue: float
    saturation: float = 1.0
    value: float = 1.0

    def to_rgb(self) -> "RGB":
        return RGB.from_hsv(self.hue, self.saturation, self.value)


BLACK = HSV(0.0, 0.0, 0.0)


@dataclass
class RGB:
    """RGB color value."""
    r: int
    g: int
    b: int

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "RGB":
        """Create RGB from HSV (all values 0.0-1.0)."""
        r, g, b = colorsys.hsv_to_rgb(h % 1.0, s, v)
        return cls(int(r * 255), int(g * 255), int(b * 255))

    @property
    def brightness(self) -> float:
        """Mean channel level, 0.0-1.0."""
        return (self.r + self.g + self.b) / (3 * 255)


class Vec3(NamedTuple):
    """A position in 3D space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def lerp(self, other: "Vec3", t: float) -> "Vec3":
        """Linearly interpolate toward other (t clamped to 0.0-1.0)."""
        t = max(0.0, min(1.0, t))
        return Vec3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )
