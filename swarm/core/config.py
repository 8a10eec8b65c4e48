"""
Configuration classes and defaults for the flocking simulation.
"""

import json
import logging
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import List, Literal, Optional, Union

from .errors import ConfigError

logger = logging.getLogger(__name__)


# Adjusts the strength of all the swarming gains together
SWARM_STRENGTH = 1.2

UPDATE_MODES = ("sequential", "simultaneous")
NEIGHBOR_SEARCHES = ("brute", "grid")


@dataclass
class FlockConfig:
    """Configuration for the flocking simulation."""

    # World (a square of this side length)
    boundMax: float = 800

    # Population
    boidCount: int = 950
    initialSpeedRange: int = 10
    seed: Optional[int] = None

    # Neighbor detection
    neighborRadius: float = 70.0
    neighborSearch: Literal["brute", "grid"] = "brute"

    # Separation ("don't crowd")
    personalSpaceRadius: float = 16.0
    separationGain: float = 0.014 * SWARM_STRENGTH

    # Cohesion ("get close")
    cohesionGain: float = 0.007 * SWARM_STRENGTH

    # Alignment ("match velocity")
    alignmentGain: float = 0.014 * SWARM_STRENGTH

    # Movement
    speedCap: float = 6.0
    updateMode: Literal["sequential", "simultaneous"] = "sequential"

    # Visualization
    windowTitle: str = "Swarm"
    fpsTarget: int = 60
    vsync: bool = True
    boidSize: int = 8
    spritePath: Optional[str] = None
    backgroundColor: List[int] = field(default_factory=lambda: [240, 248, 255])
    boidColor: List[int] = field(default_factory=lambda: [30, 30, 30])
    gridColor: List[int] = field(default_factory=lambda: [210, 218, 230])

    # Output
    metricsOutputFile: str = "swarm_metrics.json"

    def validate(self) -> "FlockConfig":
        """
        Check the configuration for values the simulation cannot run with.

        Returns:
            The config itself, so calls can be chained

        Raises:
            ConfigError: If any value is out of range
        """
        if self.boundMax <= 0:
            raise ConfigError(f"boundMax must be positive, got {self.boundMax}")
        if self.boidCount < 0:
            raise ConfigError(f"boidCount must not be negative, got {self.boidCount}")
        if self.initialSpeedRange <= 0:
            raise ConfigError(f"initialSpeedRange must be positive, got {self.initialSpeedRange}")
        if self.neighborRadius <= 0:
            raise ConfigError(f"neighborRadius must be positive, got {self.neighborRadius}")
        if self.personalSpaceRadius < 0:
            raise ConfigError(f"personalSpaceRadius must not be negative, got {self.personalSpaceRadius}")
        if self.personalSpaceRadius > self.neighborRadius:
            raise ConfigError(
                f"personalSpaceRadius ({self.personalSpaceRadius}) must not exceed "
                f"neighborRadius ({self.neighborRadius})"
            )
        for name in ("separationGain", "cohesionGain", "alignmentGain", "speedCap"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.updateMode not in UPDATE_MODES:
            raise ConfigError(f"updateMode must be one of {UPDATE_MODES}, got {self.updateMode!r}")
        if self.neighborSearch not in NEIGHBOR_SEARCHES:
            raise ConfigError(
                f"neighborSearch must be one of {NEIGHBOR_SEARCHES}, got {self.neighborSearch!r}"
            )
        return self

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "FlockConfig":
        """Create config from dictionary, ignoring keys that are not config fields."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    def with_overrides(self, **overrides) -> "FlockConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


def load_config(path: Union[str, Path], base: Optional[FlockConfig] = None) -> FlockConfig:
    """
    Load a JSON config file and overlay it on a base configuration.

    Args:
        path: Path to a JSON object of config fields
        base: Configuration to overlay (defaults to DEFAULT_CONFIG)

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds invalid values
    """
    base = base if base else DEFAULT_CONFIG
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    merged = base.to_dict()
    merged.update(data)
    return FlockConfig.from_dict(merged).validate()


# Default configuration for the interactive simulation
DEFAULT_CONFIG = FlockConfig()

# Configuration for headless benchmarking (seeded, smaller population)
BENCHMARK_CONFIG = FlockConfig(
    boidCount=400,
    seed=42,
)
