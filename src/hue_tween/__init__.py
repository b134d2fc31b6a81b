"""
hue-tween: looping timed interpolation for lights and points.

This package provides:
- Stepper: the frame-driven state machine that decides what to blend
- Tweeners that apply it to light colors and 3D positions
- An engine, frame clock, YAML config and a status server to run them
"""

from .core import (
    Stepper,
    Initial,
    Segment,
    BlendInstruction,
    TweenError,
    InvalidConfiguration,
    EmptyValueList,
    NonFiniteInput,
    HSV,
    RGB,
    Vec3,
)
from .tweeners import Tweener, ColorTweener, PositionTweener
from .engine import TweenEngine
from .clock import FrameClock
from .lights import LightRig

__all__ = [
    "Stepper",
    "Initial",
    "Segment",
    "BlendInstruction",
    "TweenError",
    "InvalidConfiguration",
    "EmptyValueList",
    "NonFiniteInput",
    "HSV",
    "RGB",
    "Vec3",
    "Tweener",
    "ColorTweener",
    "PositionTweener",
    "TweenEngine",
    "FrameClock",
    "LightRig",
]
