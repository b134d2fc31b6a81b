"""
Base tweener.

Interpolates a value by looping through a list of target values, one
segment every ``segment_duration`` seconds. Keeps a count of the loops
completed since it started (see Tweener.loops).

The Stepper decides what to blend each frame; the tweener owns the values,
the initial value, and the blend function for its value type, and pushes
the result into host state through an optional apply callback.
"""

from typing import Any, Callable

from ..core.errors import EmptyValueList
from ..core.stepper import DEFAULT_SEGMENT_DURATION, BlendInstruction, Initial, Stepper


class Tweener:
    """Drives a Stepper over a list of values of one type."""

    kind = "generic"

    def __init__(
        self,
        values: list,
        initial_value: Any,
        blend: Callable[[Any, Any, float], Any],
        segment_duration: float = DEFAULT_SEGMENT_DURATION,
        apply: Callable[[Any], None] | None = None,
        strict_boundary: bool = False,
    ):
        """
        Args:
            values: Ordered target values; may be edited between frames
            initial_value: Value the first segment starts from
            blend: blend(a, b, ratio) for this value type
            segment_duration: Seconds per segment
            apply: Called with the blended value every frame
            strict_boundary: See Stepper

        Raises:
            EmptyValueList: If values is empty
            InvalidConfiguration: If segment_duration is not positive
        """
        if not values:
            raise EmptyValueList("Tweener needs at least one value")

        self.values = values
        self.initial_value = initial_value
        self.blend = blend
        self.apply = apply
        self.stepper = Stepper(segment_duration, strict_boundary=strict_boundary)

        self.current_value = initial_value
        self.last_instruction: BlendInstruction | None = None

    @property
    def loops(self) -> int:
        """Number of full passes through the values completed so far."""
        return self.stepper.loops

    @property
    def segment_duration(self) -> float:
        return self.stepper.segment_duration

    def update(self, delta_time: float) -> Any:
        """
        Advance by one frame and apply the blended value.

        Args:
            delta_time: Seconds since the previous update

        Returns:
            The blended value for this frame
        """
        instruction = self.stepper.advance(delta_time, len(self.values))
        value = self.resolve(instruction)

        self.last_instruction = instruction
        self.current_value = value
        if self.apply is not None:
            self.apply(value)
        return value

    def resolve(self, instruction: BlendInstruction) -> Any:
        """Compute the value an instruction describes, using our own values."""
        if isinstance(instruction, Initial):
            return self.blend(
                self.initial_value,
                self.values[instruction.target_index],
                instruction.ratio,
            )
        return self.blend(
            self.values[instruction.start_index],
            self.values[instruction.end_index],
            instruction.ratio,
        )

    def encode_value(self, value: Any) -> Any:
        """JSON-ready form of a value (override for non-primitive types)."""
        return value

    def get_status(self) -> dict:
        """Snapshot of this tweener for status reporting."""
        instruction = self.last_instruction
        if instruction is None:
            step = None
        elif isinstance(instruction, Initial):
            step = {
                "variant": "initial",
                "target_index": instruction.target_index,
                "ratio": instruction.ratio,
            }
        else:
            step = {
                "variant": "segment",
                "start_index": instruction.start_index,
                "end_index": instruction.end_index,
                "ratio": instruction.ratio,
            }

        return {
            "kind": self.kind,
            "loops": self.loops,
            "segment_duration": self.segment_duration,
            "num_values": len(self.values),
            "instruction": step,
            "value": self.encode_value(self.current_value),
        }
