"""
Interpolation stepper.

Turns elapsed frame time into blend instructions that walk through an
ordered list of values, one fixed-duration segment at a time, wrapping
around at the end of the list and counting completed loops.

The stepper never sees the values themselves. It only receives how many
there are on each frame and answers with indices and a ratio; the driver
does the actual blending.
"""

from dataclasses import dataclass
import math

from .errors import EmptyValueList, InvalidConfiguration, NonFiniteInput

DEFAULT_SEGMENT_DURATION = 2.0

# start_index before the first segment boundary: blend from the initial value.
AWAITING_FIRST_SEGMENT = -1


@dataclass(frozen=True)
class Initial:
    """Blend from the driver's initial value toward values[target_index]."""
    target_index: int
    ratio: float


@dataclass(frozen=True)
class Segment:
    """Blend from values[start_index] toward values[end_index]."""
    start_index: int
    end_index: int
    ratio: float


BlendInstruction = Initial | Segment


class Stepper:
    """
    Frame-driven state machine for a looping interpolation sequence.

    Call advance() once per frame with the time since the previous frame
    and the current number of values. The machine starts out blending from
    the driver's initial value toward the first value; once the first
    segment completes it cycles through the list forever.

    Example (segment_duration=2.0, two values, one second per frame):
        Initial(0, 0.5)
        Segment(0, 1, 0.0)
        Segment(0, 1, 0.5)
        Segment(1, 0, 0.0)   # wrapped, loops == 1
        Segment(1, 0, 0.5)
    """

    def __init__(
        self,
        segment_duration: float = DEFAULT_SEGMENT_DURATION,
        strict_boundary: bool = False,
    ):
        """
        Args:
            segment_duration: Seconds spent blending between two values (> 0)
            strict_boundary: Only cross a segment boundary once the elapsed
                time is strictly greater than segment_duration, instead of
                greater or equal

        Raises:
            InvalidConfiguration: If segment_duration is not a positive number
        """
        if not isinstance(segment_duration, (int, float)) or isinstance(segment_duration, bool):
            raise InvalidConfiguration(
                f"Segment duration must be a number, got {segment_duration!r}"
            )
        if not math.isfinite(segment_duration) or segment_duration <= 0:
            raise InvalidConfiguration(
                f"Segment duration must be positive, got {segment_duration}"
            )

        self._segment_duration = float(segment_duration)
        self._strict_boundary = strict_boundary

        self._elapsed = 0.0
        self._start_index = AWAITING_FIRST_SEGMENT
        self._end_index = 0
        self._loops = 0

    @property
    def segment_duration(self) -> float:
        return self._segment_duration

    @property
    def elapsed(self) -> float:
        """Time accumulated since the current segment started."""
        return self._elapsed

    @property
    def start_index(self) -> int:
        return self._start_index

    @property
    def end_index(self) -> int:
        return self._end_index

    @property
    def loops(self) -> int:
        """Number of full passes through the value list completed so far."""
        return self._loops

    @property
    def is_cycling(self) -> bool:
        """False until the first segment boundary has been crossed."""
        return self._start_index != AWAITING_FIRST_SEGMENT

    def advance(self, delta_time: float, num_steps: int) -> BlendInstruction:
        """
        Advance the clock by one frame.

        At most one segment boundary is crossed per call; a long frame just
        finishes the current segment rather than skipping ahead.

        Args:
            delta_time: Seconds since the previous call (>= 0, finite)
            num_steps: Current number of values in the driver's list (> 0)

        Returns:
            The blend the driver should perform this frame

        Raises:
            NonFiniteInput: If delta_time is negative, NaN or infinite
            EmptyValueList: If num_steps is zero or negative
        """
        if num_steps <= 0:
            raise EmptyValueList(f"Cannot interpolate through {num_steps} values")
        if not math.isfinite(delta_time) or delta_time < 0:
            raise NonFiniteInput(f"Delta time must be finite and >= 0, got {delta_time}")

        # The list may have shrunk since the last frame.
        last = num_steps - 1
        if self._end_index > last:
            self._end_index = last
        if self._start_index > last:
            self._start_index = last

        self._elapsed += delta_time

        if self._boundary_crossed():
            self._start_index = self._end_index
            self._end_index += 1
            if self._end_index >= num_steps:
                self._start_index = last
                self._end_index = 0
                self._loops += 1
            self._elapsed = 0.0

        ratio = self._elapsed / self._segment_duration

        if self._start_index == AWAITING_FIRST_SEGMENT:
            return Initial(self._end_index, ratio)
        return Segment(self._start_index, self._end_index, ratio)

    def _boundary_crossed(self) -> bool:
        if self._strict_boundary:
            return self._elapsed > self._segment_duration
        return self._elapsed >= self._segment_duration

    def __repr__(self) -> str:
        return (
            f"Stepper(segment_duration={self._segment_duration}, "
            f"start={self._start_index}, end={self._end_index}, "
            f"elapsed={self._elapsed:.3f}, loops={self._loops})"
        )
