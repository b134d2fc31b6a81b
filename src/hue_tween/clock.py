"""Frame clock for driving tweeners from a render loop."""

import time


class FrameClock:
    """
    Measures the time between frames.

    Tweeners only ever see deltas, so stopping the loop and starting it again
    later needs nothing more than a reset() to avoid one huge frame.
    """

    def __init__(self, fps: int = 25):
        if fps <= 0:
            raise ValueError(f"FPS must be positive, got {fps}")
        self.fps = fps
        self.frame_time = 1.0 / fps
        self.frame = 0
        self.last_update = time.monotonic()

    def tick(self) -> float:
        """
        Mark the start of a frame. Call this once per frame.

        Returns:
            Seconds since the previous tick (or since reset)
        """
        now = time.monotonic()
        elapsed = now - self.last_update
        self.last_update = now
        self.frame += 1
        return elapsed

    def sleep_until_next_frame(self) -> None:
        """Sleep out whatever is left of the current frame."""
        remaining = self.frame_time - (time.monotonic() - self.last_update)
        if remaining > 0:
            time.sleep(remaining)

    def reset(self) -> None:
        """Restart delta measurement from now."""
        self.last_update = time.monotonic()
