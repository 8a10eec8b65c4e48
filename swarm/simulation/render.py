"""
Drawing of committed flock state onto pygame surfaces.
"""

import logging
import math
from typing import Iterable, List, Optional, Tuple

import pygame

from ..core.config import FlockConfig
from ..core.errors import AssetError
from ..core.flock import AgentView

logger = logging.getLogger(__name__)

# Half-angle of the arrow's tail, in radians from the heading
ARROW_TAIL_ANGLE = 2.5


def load_sprite(path: str) -> pygame.Surface:
    """
    Load the boid sprite image.

    Raises:
        AssetError: If the file is missing or cannot be decoded
    """
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError) as e:
        raise AssetError(f"Cannot load sprite {path}: {e}") from e


def arrow_points(position: Tuple[float, float], heading: float, size: float) -> List[Tuple[float, float]]:
    """Triangle pointing along ``heading``, centered on ``position``."""
    x, y = position
    tip = (x + math.cos(heading) * size, y + math.sin(heading) * size)
    left = (x + math.cos(heading + ARROW_TAIL_ANGLE) * size * 0.6,
            y + math.sin(heading + ARROW_TAIL_ANGLE) * size * 0.6)
    right = (x + math.cos(heading - ARROW_TAIL_ANGLE) * size * 0.6,
             y + math.sin(heading - ARROW_TAIL_ANGLE) * size * 0.6)
    return [tip, left, right]


class BoidRenderer:
    """
    Draws each boid at its committed position, rotated to its heading.

    Uses the configured sprite when there is one, otherwise a filled arrow.
    Reads only AgentView snapshots, never live boids.
    """

    def __init__(self, config: FlockConfig, sprite: Optional[pygame.Surface] = None):
        self.config = config
        if sprite is None and config.spritePath:
            sprite = load_sprite(config.spritePath)
            logger.debug("Loaded sprite %s", config.spritePath)
        self.sprite = sprite

    def draw(self, surface: pygame.Surface, views: Iterable[AgentView], show_grid: bool = False) -> None:
        """Render one frame of the flock onto ``surface``."""
        surface.fill(self.config.backgroundColor)

        if show_grid:
            self._draw_grid(surface)

        for view in views:
            if self.sprite is not None:
                self._draw_sprite(surface, view)
            else:
                pygame.draw.polygon(surface, self.config.boidColor,
                                    arrow_points(view.position, view.heading, self.config.boidSize))

    def _draw_sprite(self, surface: pygame.Surface, view: AgentView) -> None:
        # pygame rotates counter-clockwise while screen y grows downward
        rotated = pygame.transform.rotate(self.sprite, -math.degrees(view.heading))
        rect = rotated.get_rect(center=(int(view.position[0]), int(view.position[1])))
        surface.blit(rotated, rect)

    def _draw_grid(self, surface: pygame.Surface) -> None:
        """Draw the neighborhood-radius grid used by the spatial index."""
        step = self.config.neighborRadius
        extent = int(self.config.boundMax)
        x = 0.0
        while x <= extent:
            pygame.draw.line(surface, self.config.gridColor, (int(x), 0), (int(x), extent), 1)
            pygame.draw.line(surface, self.config.gridColor, (0, int(x)), (extent, int(x)), 1)
            x += step
