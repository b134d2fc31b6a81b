"""Configuration file loading."""

from pathlib import Path
from typing import Any
import yaml

from ..core.errors import InvalidConfiguration
from ..core.stepper import DEFAULT_SEGMENT_DURATION
from .schema import (
    DEFAULT_PORT,
    TWEENER_KINDS,
    ServerConfig,
    TweenConfig,
    TweenerConfig,
)


def load_config(config_path: Path) -> TweenConfig:
    """
    Load configuration from YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidConfiguration: If any section is malformed
    """
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Config root must be a mapping: {config_path}")

    # Parse server config
    server_data = data.get("server") or {}
    if not isinstance(server_data, dict):
        raise InvalidConfiguration("'server' must be a mapping")
    host = server_data.get("host", "localhost")
    if not isinstance(host, str) or not host:
        raise InvalidConfiguration(f"server.host must be a hostname, got {host!r}")
    server = ServerConfig(
        enabled=_bool(server_data, "enabled", False, "server.enabled"),
        host=host,
        port=_int(server_data, "port", DEFAULT_PORT, "server.port", minimum=1, maximum=65535),
    )

    # Parse tweeners
    tweeners_data = data.get("tweeners") or []
    if not isinstance(tweeners_data, list):
        raise InvalidConfiguration("'tweeners' must be a list")

    tweeners = []
    seen: set[str] = set()
    for i, tweener_data in enumerate(tweeners_data):
        tweener = parse_tweener(tweener_data, i)
        if tweener.name in seen:
            raise InvalidConfiguration(f"Duplicate tweener name '{tweener.name}'")
        seen.add(tweener.name)
        tweeners.append(tweener)

    return TweenConfig(
        fps=_int(data, "fps", 25, "fps", minimum=1),
        num_lights=_int(data, "num_lights", 6, "num_lights", minimum=1),
        tweeners=tweeners,
        server=server,
    )


def _int(data: dict, key: str, default: int, label: str, minimum: int, maximum: int | None = None) -> int:
    """Read an integer field (bools rejected) within [minimum, maximum]."""
    value = data.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfiguration(f"{label} must be an integer, got {value!r}")
    if value < minimum or (maximum is not None and value > maximum):
        upper = f"-{maximum}" if maximum is not None else " or more"
        raise InvalidConfiguration(f"{label} must be {minimum}{upper}, got {value}")
    return value


def _bool(data: dict, key: str, default: bool, label: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise InvalidConfiguration(f"{label} must be true or false, got {value!r}")
    return value


def _is_point(value: Any) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 3
        and all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in value)
    )


def parse_tweener(data: dict, index: int) -> TweenerConfig:
    """Parse and validate one entry of the ``tweeners`` list."""
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Tweener #{index} must be a mapping")

    name = data.get("name") or f"tweener_{index}"
    if not isinstance(name, str):
        raise InvalidConfiguration(f"Tweener #{index}: name must be a string, got {name!r}")

    kind = data.get("kind", "color")
    if kind not in TWEENER_KINDS:
        raise InvalidConfiguration(
            f"Tweener '{name}': unknown kind '{kind}' (expected one of {', '.join(TWEENER_KINDS)})"
        )

    values = data.get("values") or []
    if not isinstance(values, list) or not values:
        raise InvalidConfiguration(f"Tweener '{name}': 'values' must be a non-empty list")

    duration = data.get("segment_duration", DEFAULT_SEGMENT_DURATION)
    if not isinstance(duration, (int, float)) or isinstance(duration, bool) or duration <= 0:
        raise InvalidConfiguration(
            f"Tweener '{name}': segment_duration must be positive, got {duration!r}"
        )

    light_id = _int_field(data, "light_id", 0, name)

    initial = data.get("initial", [0.0, 0.0, 0.0])
    if kind == "position":
        for value in values:
            if not _is_point(value):
                raise InvalidConfiguration(
                    f"Tweener '{name}': position values must be [x, y, z], got {value!r}"
                )
        if not _is_point(initial):
            raise InvalidConfiguration(
                f"Tweener '{name}': initial must be [x, y, z], got {initial!r}"
            )

    return TweenerConfig(
        name=name,
        kind=kind,
        values=values,
        segment_duration=float(duration),
        strict_boundary=bool(data.get("strict_boundary", False)),
        light_id=light_id,
        initial=initial,
    )


def _int_field(data: dict, key: str, default: int, name: str) -> int:
    try:
        return _int(data, key, default, key, minimum=0)
    except InvalidConfiguration as e:
        raise InvalidConfiguration(f"Tweener '{name}': {e}") from e
