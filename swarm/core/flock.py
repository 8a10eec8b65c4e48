"""
Flock: owns the population and advances it one frame at a time.
"""

import logging
import time
from typing import Iterable, List, NamedTuple, Tuple

import numpy as np
import pygame

from .agents.boid import Boid
from .config import FlockConfig
from .neighbors import make_neighbor_finder

logger = logging.getLogger(__name__)


class AgentView(NamedTuple):
    """Read-only copy of one agent's committed state."""
    index: int
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    heading: float


class Flock:
    """
    A fixed-size, ordered population of boids and its stepper.

    Two update modes are supported:

    ``sequential`` (the default)
        Boids are updated one after another in population order and each
        commits its new state immediately. A boid late in the order sees
        some neighbors already moved this frame and others not.

    ``simultaneous``
        Every neighbor query and rule input reads a snapshot of the
        population taken at the start of the frame, so all boids update
        from the same state. This produces different motion from the
        sequential mode.

    A step has no suspension points and always runs to completion; state
    should only be read between steps.
    """

    def __init__(self, config: FlockConfig, boids: Iterable[Boid], neighbor_finder=None):
        """
        Initialize the flock.

        Args:
            config: Flock configuration (read only for the flock's lifetime)
            boids: Initial population, in update order
            neighbor_finder: Neighbor finder to use (built from the config if None)
        """
        self.config = config
        self.boids: List[Boid] = list(boids)
        self.neighbor_finder = neighbor_finder if neighbor_finder else make_neighbor_finder(config)
        self.frame = 0

    def __len__(self) -> int:
        return len(self.boids)

    def step(self) -> None:
        """Advance the whole population by exactly one frame."""
        start = time.perf_counter()

        if self.config.updateMode == "simultaneous":
            self._step_simultaneous()
        else:
            self._step_sequential()

        self.frame += 1
        logger.debug("Frame %d: %d boids stepped in %.2f ms",
                     self.frame, len(self.boids), (time.perf_counter() - start) * 1000)

    def run(self, frames: int) -> None:
        """Advance the population by ``frames`` frames."""
        for _ in range(frames):
            self.step()

    def _step_sequential(self) -> None:
        finder = self.neighbor_finder
        finder.rebuild(self.boids)

        for boid in self.boids:
            neighbors = finder.neighbors(boid)
            previous_position = pygame.Vector2(boid.position)
            boid.update(neighbors)
            finder.relocate(boid, previous_position)

    def _step_simultaneous(self) -> None:
        finder = self.neighbor_finder
        frozen = [boid.copy() for boid in self.boids]
        finder.rebuild(frozen)

        # Each live boid is unchanged until its own update, so its state
        # matches the frozen copy when its neighbors are looked up.
        for boid in self.boids:
            boid.update(finder.neighbors(boid))

        finder.rebuild(self.boids)

    def snapshot(self) -> Tuple[AgentView, ...]:
        """Committed state of every boid, for renderers and metrics."""
        return tuple(
            AgentView(
                boid.index,
                (boid.position.x, boid.position.y),
                (boid.velocity.x, boid.velocity.y),
                boid.heading,
            )
            for boid in self.boids
        )

    def positions(self) -> np.ndarray:
        """Positions as an (n, 2) float array."""
        return np.array([(b.position.x, b.position.y) for b in self.boids], dtype=float).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        """Velocities as an (n, 2) float array."""
        return np.array([(b.velocity.x, b.velocity.y) for b in self.boids], dtype=float).reshape(-1, 2)
