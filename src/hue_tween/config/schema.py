"""Configuration dataclasses."""

from dataclasses import dataclass, field
from typing import Any

from ..core.stepper import DEFAULT_SEGMENT_DURATION

# Default port for the status server
DEFAULT_PORT = 9877

TWEENER_KINDS = ("color", "position")


@dataclass
class TweenerConfig:
    """One tweener: what to animate and through which values."""
    name: str
    kind: str  # "color" or "position"
    values: list[Any] = field(default_factory=list)
    segment_duration: float = DEFAULT_SEGMENT_DURATION
    strict_boundary: bool = False
    light_id: int = 0  # color only
    initial: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])  # position only


@dataclass
class ServerConfig:
    """Status server configuration."""
    enabled: bool = False
    host: str = "localhost"
    port: int = DEFAULT_PORT


@dataclass
class TweenConfig:
    """Main application configuration."""
    fps: int = 25
    num_lights: int = 6
    tweeners: list[TweenerConfig] = field(default_factory=list)
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def with_defaults(cls) -> "TweenConfig":
        """Create config with a small demo setup."""
        return cls(
            tweeners=[
                TweenerConfig(
                    name="left",
                    kind="color",
                    values=["red", "amber", "violet"],
                    light_id=0,
                ),
                TweenerConfig(
                    name="right",
                    kind="color",
                    values=["blue", "teal"],
                    segment_duration=3.0,
                    light_id=5,
                ),
                TweenerConfig(
                    name="spot",
                    kind="position",
                    values=[[0.0, 2.0, 0.0], [1.5, 2.0, 1.0], [-1.5, 2.0, 1.0]],
                    segment_duration=1.5,
                ),
            ]
        )
