"""
Interactive simulation with pygame GUI.
"""

import json
import logging
from typing import Optional

import pygame

from ..analysis.metrics import flock_statistics
from ..core.config import FlockConfig, DEFAULT_CONFIG
from ..core.population import create_flock
from .render import BoidRenderer

logger = logging.getLogger(__name__)


class Simulation:
    """
    Interactive flocking simulation with pygame visualization.

    Each frame steps the flock once and then draws the committed state.
    The window title shows the frame rate, refreshed once per second.
    """

    def __init__(self, config: Optional[FlockConfig] = None):
        """
        Initialize the simulation.

        Args:
            config: Flock configuration (uses defaults if None)

        Raises:
            ConfigError: If the configuration is invalid
            AssetError: If the configured sprite cannot be loaded
        """
        self.config = config if config else DEFAULT_CONFIG
        self.flock = create_flock(self.config)

        pygame.init()
        size = int(self.config.boundMax)
        # pygame only honours vsync for SCALED or OPENGL displays
        flags = pygame.SCALED if self.config.vsync else 0
        self.screen = pygame.display.set_mode((size, size), flags, vsync=int(self.config.vsync))
        pygame.display.set_caption(self.config.windowTitle)
        self.clock = pygame.time.Clock()

        self.renderer = BoidRenderer(self.config)
        self.show_grid = False
        self.running = True

        self._frames_this_second = 0
        self._second_started = pygame.time.get_ticks()

    def update(self) -> None:
        """Update simulation state for one frame."""
        self.flock.step()

    def draw(self) -> None:
        """Render the current frame."""
        self.renderer.draw(self.screen, self.flock.snapshot(), self.show_grid)
        pygame.display.flip()
        self._track_fps()

    def _track_fps(self) -> None:
        self._frames_this_second += 1
        now = pygame.time.get_ticks()
        if now - self._second_started >= 1000:
            pygame.display.set_caption(f"{self.config.windowTitle} | FPS: {self._frames_this_second}")
            self._frames_this_second = 0
            self._second_started = now

    def save_metrics(self) -> None:
        """Save current flock metrics to JSON file."""
        data = {
            "statistics": flock_statistics(self.flock),
            "config": self.config.to_dict(),
        }

        try:
            with open(self.config.metricsOutputFile, 'w') as f:
                json.dump(data, f, indent=4)
            print(f"Metrics saved to {self.config.metricsOutputFile}")
        except OSError as e:
            logger.error("Error saving metrics: %s", e)

    def run(self) -> None:
        """Run the simulation main loop."""
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self._handle_keydown(event.key)

                self.update()
                self.draw()
                if self.config.fpsTarget > 0:
                    self.clock.tick(self.config.fpsTarget)
        finally:
            pygame.quit()

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_g:
            self.show_grid = not self.show_grid
        elif key == pygame.K_SPACE:
            self.save_metrics()
