"""Configuration schema and loading."""

from .schema import (
    TweenConfig,
    TweenerConfig,
    ServerConfig,
    DEFAULT_PORT,
)
from .loader import load_config

__all__ = [
    "TweenConfig",
    "TweenerConfig",
    "ServerConfig",
    "DEFAULT_PORT",
    "load_config",
]
