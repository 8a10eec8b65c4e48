"""
Boid agent class implementing the flocking rules.
"""

from typing import Sequence

from .base import Agent
from .. import vector
from ..config import FlockConfig


# Order in which flock() applies the rules. Changing it changes the
# emergent motion.
RULE_ORDER = ("cohesion", "separation", "alignment", "stay_in_bounds", "limit_speed")


class Boid(Agent):
    """
    A boid that steers by its neighbors.

    Implements the classic rules, each one adding directly to the velocity:
    - Cohesion: steer toward the centroid of the neighbors
    - Separation: steer away from neighbors inside personal space
    - Alignment: steer toward the neighbors' mean velocity

    plus elastic walls and a speed cap. Each rule sees the velocity as left
    by the rules before it in the same frame.
    """

    def __init__(self, index: int, position, velocity, config: FlockConfig, heading: float = 0.0):
        """
        Initialize a boid.

        Args:
            index: Stable handle of the boid within its population
            position: Initial position
            velocity: Initial velocity
            config: Flock configuration (read only)
            heading: Initial heading in radians
        """
        super().__init__(index, position, velocity, heading)
        self.config = config

    def flock(self, neighbors: Sequence[Agent]) -> None:
        """
        Run the rule pipeline against the given neighbors.

        Args:
            neighbors: Agents within the neighborhood radius, excluding self
        """
        self.cohesion(neighbors)
        self.separation(neighbors)
        self.alignment(neighbors)
        self.stay_in_bounds()
        self.limit_speed()

    def update(self, neighbors: Sequence[Agent]) -> None:
        """Apply the rules and commit movement for one frame."""
        self.flock(neighbors)
        self.move(self.config.boundMax)

    def cohesion(self, neighbors: Sequence[Agent]) -> None:
        """
        Steer toward the average position of the neighbors.

        Args:
            neighbors: List of nearby agents
        """
        if not neighbors:
            return

        center = vector.zero()
        for other in neighbors:
            center += other.position
        center /= len(neighbors)

        self.velocity += (center - self.position) * self.config.cohesionGain

    def separation(self, neighbors: Sequence[Agent]) -> None:
        """
        Steer away from neighbors closer than the personal space radius.

        Neighbors at exactly the radius or beyond contribute nothing.

        Args:
            neighbors: List of nearby agents
        """
        if not neighbors:
            return

        away = vector.zero()
        for other in neighbors:
            diff = self.position - other.position
            if diff.length() < self.config.personalSpaceRadius:
                away += diff

        self.velocity += away * self.config.separationGain

    def alignment(self, neighbors: Sequence[Agent]) -> None:
        """
        Steer toward the average velocity of the neighbors.

        Args:
            neighbors: List of nearby agents
        """
        if not neighbors:
            return

        average = vector.zero()
        for other in neighbors:
            average += other.velocity
        average /= len(neighbors)

        self.velocity += (average - self.velocity) * self.config.alignmentGain

    def stay_in_bounds(self) -> None:
        """Reflect off the world walls and clamp the position onto them."""
        self.contain(self.config.boundMax)

    def limit_speed(self) -> None:
        """Rescale the velocity to the speed cap when it is exceeded."""
        speed = self.velocity.length()
        if speed > self.config.speedCap:
            self.velocity *= self.config.speedCap / speed

    def copy(self) -> "Boid":
        """Return a detached copy of this boid's state."""
        return Boid(self.index, self.position, self.velocity, self.config, self.heading)
