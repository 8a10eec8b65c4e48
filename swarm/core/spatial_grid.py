"""
Spatial hash grid for efficient neighbor lookup in 2D space.
"""

import math
from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

import pygame

from .agents.base import Agent


class SpatialGrid:
    """
    Spatial hash grid for efficient neighbor lookup.

    Divides the plane into square cells keyed by
    ``floor(position / cell_size)`` and only checks the 3x3 block of cells
    around a query. With ``cell_size >= radius`` this returns exactly the
    same agents as a brute-force scan. Cells are unbounded, so agents that
    sit outside the world still hash correctly.
    """

    def __init__(self, radius: float, cell_size: float = None):
        """
        Initialize the spatial grid.

        Args:
            radius: Neighborhood radius (strict upper bound on distance)
            cell_size: Size of each grid cell (defaults to the radius)
        """
        cell_size = cell_size if cell_size else radius
        if cell_size < radius:
            raise ValueError(f"cell_size ({cell_size}) must be at least the radius ({radius})")
        self.radius = radius
        self.cell_size = cell_size
        self.grid: Dict[Tuple[int, int], List[Agent]] = defaultdict(list)

    def clear(self) -> None:
        """Clear all agents from the grid."""
        self.grid.clear()

    def _hash(self, x: float, y: float) -> Tuple[int, int]:
        """
        Convert world coordinates to grid cell coordinates.

        Args:
            x: X position in world coordinates
            y: Y position in world coordinates

        Returns:
            Tuple of (column, row) cell indices
        """
        return (math.floor(x / self.cell_size), math.floor(y / self.cell_size))

    def insert(self, agent: Agent) -> None:
        """Insert an agent into the cell of its current position."""
        cell = self._hash(agent.position.x, agent.position.y)
        self.grid[cell].append(agent)

    def rebuild(self, population: Iterable[Agent]) -> None:
        """Clear the grid and insert every agent of the population."""
        self.clear()
        for agent in population:
            self.insert(agent)

    def relocate(self, agent: Agent, previous_position: pygame.Vector2) -> None:
        """
        Move an agent to the cell of its new position.

        Args:
            agent: Agent whose position has changed
            previous_position: Position the agent was inserted at
        """
        old_cell = self._hash(previous_position.x, previous_position.y)
        new_cell = self._hash(agent.position.x, agent.position.y)
        if old_cell == new_cell:
            return

        bucket = self.grid.get(old_cell, [])
        for i, other in enumerate(bucket):
            if other.index == agent.index:
                del bucket[i]
                break
        if not bucket:
            self.grid.pop(old_cell, None)
        self.grid[new_cell].append(agent)

    def neighbors(self, agent: Agent) -> List[Agent]:
        """
        Get all other agents strictly within the radius of an agent.

        Args:
            agent: The querying agent (excluded from the result by index)

        Returns:
            List of agents within the radius, ordered by index
        """
        result = []
        position = agent.position
        for c in self._get_adjacent_cells(self._hash(position.x, position.y)):
            for other in self.grid.get(c, []):
                if other.index == agent.index:
                    continue
                if position.distance_to(other.position) < self.radius:
                    result.append(other)
        # Index order keeps floating point sums in the rules identical to a
        # population-order scan.
        result.sort(key=lambda other: other.index)
        return result

    def _get_adjacent_cells(self, cell: Tuple[int, int]) -> List[Tuple[int, int]]:
        """
        Get a cell and its 8 neighboring cells.

        Args:
            cell: The center cell as (column, row)

        Returns:
            List of cell coordinates to check
        """
        col, row = cell
        return [(col + dc, row + dr) for dc in (-1, 0, 1) for dr in (-1, 0, 1)]
