"""
CLI entry points for hue-tween.

Contains the main executable script:
- run: Pump configured tweeners from a frame loop
"""

from .run import main as run_main

__all__ = [
    "run_main",
]
