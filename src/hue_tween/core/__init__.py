"""Core tweening state machine and value types."""

from .errors import (
    TweenError,
    InvalidConfiguration,
    EmptyValueList,
    NonFiniteInput,
)
from .stepper import (
    Stepper,
    Initial,
    Segment,
    BlendInstruction,
    DEFAULT_SEGMENT_DURATION,
)
from .types import HSV, RGB, Vec3, BLACK

__all__ = [
    "TweenError",
    "InvalidConfiguration",
    "EmptyValueList",
    "NonFiniteInput",
    "Stepper",
    "Initial",
    "Segment",
    "BlendInstruction",
    "DEFAULT_SEGMENT_DURATION",
    "HSV",
    "RGB",
    "Vec3",
    "BLACK",
]
