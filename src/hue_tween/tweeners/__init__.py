"""Tweeners: drive a Stepper over a list of values of one type."""

from .base import Tweener
from .color import ColorTweener
from .position import PositionTweener, lerp_vec3, to_vec3

__all__ = [
    "Tweener",
    "ColorTweener",
    "PositionTweener",
    "lerp_vec3",
    "to_vec3",
]
