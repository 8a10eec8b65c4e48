"""
Headless benchmark simulation for performance testing and data collection.
"""

import logging
import time
from typing import Any, Dict, Optional

import numpy as np
import pygame

try:
    import cv2
    VIDEO_SUPPORT = True
except ImportError:
    VIDEO_SUPPORT = False

from ..analysis.metrics import flock_statistics
from ..core.config import FlockConfig
from ..core.population import create_flock
from .render import BoidRenderer

logger = logging.getLogger(__name__)


# Frames between two metric samples
METRICS_INTERVAL = 10

# Frames between two progress lines
PROGRESS_INTERVAL = 1000


class BenchmarkSimulation:
    """
    Benchmark simulation for measuring flock behaviour and step cost.

    Runs without a window. Rendering only happens when a video is being
    recorded, onto an off-screen surface.
    """

    def __init__(self, config: FlockConfig, enable_video: bool = False,
                 video_filename: Optional[str] = None, video_fps: int = 30):
        """
        Initialize benchmark simulation.

        Args:
            config: Flock configuration
            enable_video: Whether to record video (needs OpenCV)
            video_filename: Output video filename
            video_fps: Video frame rate
        """
        self.config = config
        self.flock = create_flock(config)

        if enable_video and not VIDEO_SUPPORT:
            logger.warning("OpenCV is not installed; video recording disabled")
        self.enable_video = enable_video and VIDEO_SUPPORT and bool(video_filename)
        self.video_filename = video_filename
        self.video_writer = None
        self.frame_skip = max(1, config.fpsTarget // video_fps) if config.fpsTarget > 0 else 1

        if self.enable_video:
            size = int(config.boundMax)
            self.surface = pygame.Surface((size, size))
            self.renderer = BoidRenderer(config)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(video_filename, fourcc, video_fps, (size, size))
            print(f"  Recording video to: {video_filename}")

        self.metrics_over_time = []
        self.start_time = None

    def run_benchmark(self, max_frames: int) -> Dict[str, Any]:
        """
        Run benchmark for specified number of frames.

        Args:
            max_frames: Number of frames to simulate

        Returns:
            Results dictionary with all statistics
        """
        print(f"Running benchmark for {max_frames} frames "
              f"({len(self.flock)} boids, {self.config.updateMode}, {self.config.neighborSearch})...")

        self.start_time = time.perf_counter()
        self.metrics_over_time.append(flock_statistics(self.flock))

        try:
            while self.flock.frame < max_frames:
                self.flock.step()
                frame = self.flock.frame

                if frame % METRICS_INTERVAL == 0:
                    self.metrics_over_time.append(flock_statistics(self.flock))

                if self.video_writer and frame % self.frame_skip == 0:
                    self._capture_frame()

                if frame % PROGRESS_INTERVAL == 0:
                    elapsed = time.perf_counter() - self.start_time
                    progress = (frame / max_frames) * 100
                    print(f"  Progress: {progress:.1f}% ({frame}/{max_frames} frames, "
                          f"{elapsed:.1f}s elapsed)")
        finally:
            if self.video_writer:
                self.video_writer.release()
                print("  Video saved successfully!")

        return self.get_results()

    def _capture_frame(self) -> None:
        """Render the current state off-screen and append it to the video."""
        self.renderer.draw(self.surface, self.flock.snapshot())
        frame = pygame.surfarray.array3d(self.surface)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_results(self) -> Dict[str, Any]:
        """
        Get benchmark results.

        Returns:
            Dictionary containing timing, final metrics and the metric time series
        """
        elapsed = time.perf_counter() - self.start_time if self.start_time else 0.0
        frames = self.flock.frame
        final = flock_statistics(self.flock)

        return {
            "frames": frames,
            "boid_count": len(self.flock),
            "update_mode": self.config.updateMode,
            "neighbor_search": self.config.neighborSearch,
            "elapsed_time_seconds": elapsed,
            "frames_per_second": frames / elapsed if elapsed > 0 else 0.0,
            "final_polarization": final["polarization"],
            "final_cohesion": final["cohesion"],
            "final_avg_speed": final["avg_speed"],
            "final_avg_neighbors": final["avg_neighbors"],
            "metrics_over_time": self.metrics_over_time,
        }


def compare_neighbor_search(config: FlockConfig, frames: int) -> Dict[str, Any]:
    """
    Run brute-force and grid neighbor search from the same seed.

    Both searches must produce the same flock, so the final positions and
    velocities are compared exactly.

    Args:
        config: Flock configuration; a seed of 0 is used when it has none
        frames: Frames to simulate per run

    Returns:
        Dictionary with both runs' results, ``identical`` and ``speedup``
    """
    seed = config.seed if config.seed is not None else 0
    brute = BenchmarkSimulation(config.with_overrides(neighborSearch="brute", seed=seed))
    grid = BenchmarkSimulation(config.with_overrides(neighborSearch="grid", seed=seed))

    brute_results = brute.run_benchmark(frames)
    grid_results = grid.run_benchmark(frames)

    identical = (np.array_equal(brute.flock.positions(), grid.flock.positions())
                 and np.array_equal(brute.flock.velocities(), grid.flock.velocities()))
    if not identical:
        logger.warning("Brute-force and grid neighbor search diverged after %d frames", frames)

    grid_elapsed = grid_results["elapsed_time_seconds"]
    return {
        "identical": identical,
        "speedup": brute_results["elapsed_time_seconds"] / grid_elapsed if grid_elapsed > 0 else 0.0,
        "brute": brute_results,
        "grid": grid_results,
    }
