"""
Population seeding.
"""

import logging
import random
from typing import List, Optional

from .agents.boid import Boid
from .config import FlockConfig
from .flock import Flock

logger = logging.getLogger(__name__)


def seed_population(config: FlockConfig, rng: Optional[random.Random] = None) -> List[Boid]:
    """
    Create ``config.boidCount`` boids with random integer positions and velocities.

    Velocity components are drawn from ``[0, initialSpeedRange)`` and position
    components from ``[0, boundMax)``, in the order velocity x, velocity y,
    position x, position y for each boid. With the defaults that is
    ``[0, 9]`` and ``[0, 799]``.

    Args:
        config: Flock configuration
        rng: Source of randomness with a ``randrange`` method
            (a ``random.Random(config.seed)`` if None)

    Returns:
        Boids with indices 0..n-1
    """
    rng = rng if rng else random.Random(config.seed)
    speed_range = int(config.initialSpeedRange)
    extent = max(1, int(config.boundMax))

    boids = []
    for i in range(config.boidCount):
        velocity = (rng.randrange(speed_range), rng.randrange(speed_range))
        position = (rng.randrange(extent), rng.randrange(extent))
        boids.append(Boid(i, position, velocity, config))
    return boids


def create_flock(config: FlockConfig, rng: Optional[random.Random] = None) -> Flock:
    """
    Validate the configuration and build a freshly seeded flock.

    Raises:
        ConfigError: If the configuration is invalid
    """
    config.validate()
    flock = Flock(config, seed_population(config, rng))
    logger.debug("Seeded %d boids (seed=%s, update=%s, search=%s)",
                 len(flock), config.seed, config.updateMode, config.neighborSearch)
    return flock
