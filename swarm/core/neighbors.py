"""
Neighbor discovery: brute-force scan and strategy selection.
"""

from typing import List, Sequence

import pygame

from .agents.base import Agent
from .config import FlockConfig
from .spatial_grid import SpatialGrid


def find_neighbors(agent: Agent, population: Sequence[Agent], radius: float) -> List[Agent]:
    """
    Return every other agent strictly closer than ``radius`` to ``agent``.

    The agent is recognized by its index, so another agent sharing its
    exact position and velocity is still reported.

    Args:
        agent: The querying agent
        population: All agents, including the querying one
        radius: Neighborhood radius

    Returns:
        List of neighboring agents, in population order
    """
    position = agent.position
    return [
        other for other in population
        if other.index != agent.index and position.distance_to(other.position) < radius
    ]


class BruteForceNeighbors:
    """
    Neighbor finder scanning the whole population on every query.

    O(n) per query and O(n^2) per frame, which is fine for populations in
    the low thousands. Always reads the live positions of the population it
    was built with.
    """

    def __init__(self, radius: float):
        self.radius = radius
        self.population: Sequence[Agent] = ()

    def rebuild(self, population: Sequence[Agent]) -> None:
        self.population = population

    def relocate(self, agent: Agent, previous_position: pygame.Vector2) -> None:
        pass

    def neighbors(self, agent: Agent) -> List[Agent]:
        return find_neighbors(agent, self.population, self.radius)


def make_neighbor_finder(config: FlockConfig):
    """
    Build the neighbor finder selected by ``config.neighborSearch``.

    Both finders return the same set of agents; the grid only changes how
    fast it is found.
    """
    if config.neighborSearch == "grid":
        return SpatialGrid(config.neighborRadius)
    return BruteForceNeighbors(config.neighborRadius)
