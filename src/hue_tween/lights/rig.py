"""In-memory light state that color tweeners read from and write to."""

from ..core.types import BLACK, HSV


class LightRig:
    """
    Current color of every light in a setup.

    Lights that were never set read as black. flush() draws a one-line
    brightness readout to the console, handy when running without hardware.
    """

    def __init__(self, num_lights: int = 6):
        self.num_lights = num_lights
        self._states: dict[int, HSV] = {}

    def _check_light(self, light_id: int) -> None:
        if not isinstance(light_id, int) or isinstance(light_id, bool):
            raise ValueError(f"Light id must be an integer, got {light_id!r}")
        if not 0 <= light_id < self.num_lights:
            raise ValueError(f"Light {light_id} out of range (0-{self.num_lights - 1})")

    def set_light_color(self, light_id: int, color: HSV) -> None:
        """Set one light's color."""
        self._check_light(light_id)
        self._states[light_id] = color

    def get_light_color(self, light_id: int) -> HSV:
        """Get one light's current color."""
        self._check_light(light_id)
        return self._states.get(light_id, BLACK)

    def set_all_lights(self, color: HSV) -> None:
        """Set all lights."""
        for i in range(self.num_lights):
            self._states[i] = color

    def render_bars(self) -> str:
        """Brightness bar per light, e.g. "L0:████░░░░░░ L1:..."."""
        bars = []
        for i in range(self.num_lights):
            brightness = self.get_light_color(i).to_rgb().brightness
            bar_len = int(brightness * 10)
            bars.append(f"L{i}:{'█' * bar_len}{'░' * (10 - bar_len)}")
        return " ".join(bars)

    def flush(self) -> None:
        """Print current states (for debugging)."""
        print(self.render_bars(), end="\r", flush=True)

    @property
    def light_count(self) -> int:
        return self.num_lights
