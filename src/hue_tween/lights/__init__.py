"""Host-side light state."""

from .rig import LightRig

__all__ = [
    "LightRig",
]
