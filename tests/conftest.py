"""Pytest configuration - headless pygame and shared fixtures."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest  # noqa: E402

from swarm.core.agents.boid import Boid  # noqa: E402
from swarm.core.config import FlockConfig  # noqa: E402


@pytest.fixture
def config():
    """Default flock configuration."""
    return FlockConfig()


@pytest.fixture
def make_boid(config):
    """Factory for boids sharing the default configuration."""
    def _make(index, position, velocity=(0, 0), cfg=None):
        return Boid(index, position, velocity, cfg if cfg else config)
    return _make
