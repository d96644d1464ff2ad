"""
Engine configuration.

Defaults match the classic browser game (30x30 board, 12 obstacles,
110 ms ticks). Values can come from keyword arguments, a plain dict using
either the camelCase option names of the UI (gridWidth, wrapEnabled, ...)
or snake_case, or SNAKE_* environment variables (.env supported).
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_GRID_WIDTH,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_OBSTACLE_COUNT,
    DEFAULT_SPEED_MS,
    RESERVED_MARGIN,
    SPEED_FLOOR_MS,
)
from domain.errors import ConfigurationError

# UI option name -> dataclass field
_OPTION_ALIASES = {
    "gridWidth": "grid_width",
    "gridHeight": "grid_height",
    "wrapEnabled": "wrap_enabled",
    "obstaclesEnabled": "obstacles_enabled",
    "obstacleCount": "obstacle_count",
    "initialSpeedMs": "initial_speed_ms",
}

_INT_FIELDS = ("grid_width", "grid_height", "obstacle_count", "initial_speed_ms")
_FLAG_FIELDS = ("wrap_enabled", "obstacles_enabled")

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_STRINGS


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class EngineConfig:
    grid_width: int = DEFAULT_GRID_WIDTH
    grid_height: int = DEFAULT_GRID_HEIGHT
    wrap_enabled: bool = False
    obstacles_enabled: bool = False
    obstacle_count: int = DEFAULT_OBSTACLE_COUNT
    initial_speed_ms: int = DEFAULT_SPEED_MS

    def validate(self) -> "EngineConfig":
        """
        Check the configuration can host an episode.

        Raises:
            ConfigurationError: on a value of the wrong type, non-positive
                dimensions, a board too small for the snake plus the
                free-cell margin, a negative obstacle count, or a tick
                interval below the speed floor
        """
        for name in _INT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass but never a valid count or size
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be an integer, got {type(value).__name__} {value!r}"
                )
        for name in _FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be a boolean, got {type(value).__name__} {value!r}"
                )
        if self.grid_width < 1 or self.grid_height < 1:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.grid_width}x{self.grid_height}"
            )
        required = 1 + RESERVED_MARGIN
        if self.grid_width * self.grid_height < required:
            raise ConfigurationError(
                f"Grid {self.grid_width}x{self.grid_height} is too small; "
                f"need at least {required} cells"
            )
        if self.obstacle_count < 0:
            raise ConfigurationError(f"obstacle_count must be >= 0, got {self.obstacle_count}")
        if self.initial_speed_ms < SPEED_FLOOR_MS:
            raise ConfigurationError(
                f"initial_speed_ms must be >= {SPEED_FLOOR_MS}, got {self.initial_speed_ms}"
            )
        return self

    def with_changes(self, **changes: Any) -> "EngineConfig":
        values = asdict(self)
        values.update(changes)
        return EngineConfig(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from UI-style or snake_case option names; unknown keys are rejected."""
        values: Dict[str, Any] = {}
        for key, value in options.items():
            field_name = _OPTION_ALIASES.get(key, key)
            if field_name not in cls.__dataclass_fields__:
                raise ConfigurationError(f"Unknown configuration option: {key}")
            values[field_name] = value
        return cls(**values)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        load_dotenv()
        return cls(
            grid_width=_env_int("SNAKE_GRID_WIDTH", DEFAULT_GRID_WIDTH),
            grid_height=_env_int("SNAKE_GRID_HEIGHT", DEFAULT_GRID_HEIGHT),
            wrap_enabled=_env_bool("SNAKE_WRAP", False),
            obstacles_enabled=_env_bool("SNAKE_OBSTACLES", False),
            obstacle_count=_env_int("SNAKE_OBSTACLE_COUNT", DEFAULT_OBSTACLE_COUNT),
            initial_speed_ms=_env_int("SNAKE_SPEED_MS", DEFAULT_SPEED_MS),
        )


def coerce_config(config: Optional[Any]) -> Optional[EngineConfig]:
    """Accept an EngineConfig, a mapping of options, or None."""
    if config is None or isinstance(config, EngineConfig):
        return config
    if isinstance(config, Mapping):
        return EngineConfig.from_dict(config)
    raise ConfigurationError(f"Unsupported configuration type: {type(config).__name__}")
