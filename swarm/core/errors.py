"""
Exception types for the swarm package.
"""


class SwarmError(Exception):
    """Base class for all swarm errors."""


class ConfigError(SwarmError, ValueError):
    """Raised when a flock configuration is invalid."""


class AssetError(SwarmError):
    """Raised when a presentation asset (e.g. the boid sprite) cannot be loaded."""
