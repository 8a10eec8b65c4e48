"""
Base Agent class for all simulation entities.
"""

import pygame

from .. import vector


class Agent:
    """
    Base class for all agents in the simulation.

    Holds position, velocity and heading. The heading has no life of its own:
    it is recomputed from the velocity every time movement is committed.
    The ``index`` is the agent's stable handle within its population and is
    what tells two agents apart, never their state.
    """

    def __init__(self, index: int, position, velocity=vector.ZERO, heading: float = 0.0):
        """
        Initialize an agent.

        Args:
            index: Stable handle of the agent within its population
            position: Initial position (anything pygame.Vector2 accepts)
            velocity: Initial velocity
            heading: Initial heading in radians
        """
        self.index = index
        self.position = pygame.Vector2(position)
        self.velocity = pygame.Vector2(velocity)
        self.heading = heading

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(index={self.index}, "
                f"position=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"velocity=({self.velocity.x:.2f}, {self.velocity.y:.2f}))")

    def contain(self, bound_max: float) -> None:
        """
        Bounce off the walls of the square world ``[0, bound_max]``.

        Each axis is handled independently: a coordinate below 0 or above
        ``bound_max`` is clamped to that wall and the matching velocity
        component is negated.
        """
        if self.position.x < 0:
            self.velocity.x *= -1
            self.position.x = 0
        elif self.position.x > bound_max:
            self.velocity.x *= -1
            self.position.x = bound_max

        if self.position.y < 0:
            self.velocity.y *= -1
            self.position.y = 0
        elif self.position.y > bound_max:
            self.velocity.y *= -1
            self.position.y = bound_max

    def move(self, bound_max: float) -> None:
        """
        Commit movement for this frame.

        Adds the velocity to the position, bounces the committed position
        back inside the world, then derives the heading from the final
        velocity.
        """
        self.position += self.velocity
        self.contain(bound_max)
        self.heading = vector.angle(self.velocity)

    def copy(self) -> "Agent":
        """Return a detached copy of this agent's state."""
        return Agent(self.index, self.position, self.velocity, self.heading)
