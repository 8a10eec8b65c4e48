"""
Flock-level metrics computed from position and velocity arrays.
"""

from typing import Dict

import numpy as np

from ..core.flock import Flock


def polarization(velocities: np.ndarray) -> float:
    """
    Norm of the mean unit velocity.

    1.0 when every boid heads the same way, near 0 for random headings.
    Boids with zero velocity are left out; returns 0.0 if none are moving.
    """
    velocities = np.asarray(velocities, dtype=float).reshape(-1, 2)
    speeds = np.linalg.norm(velocities, axis=1)
    moving = speeds > 0
    if not moving.any():
        return 0.0
    units = velocities[moving] / speeds[moving, None]
    return float(np.linalg.norm(units.mean(axis=0)))


def cohesion(positions: np.ndarray) -> float:
    """Average distance to the flock centroid (lower is tighter)."""
    positions = np.asarray(positions, dtype=float).reshape(-1, 2)
    if len(positions) == 0:
        return 0.0
    centroid = positions.mean(axis=0)
    return float(np.linalg.norm(positions - centroid, axis=1).mean())


def average_speed(velocities: np.ndarray) -> float:
    velocities = np.asarray(velocities, dtype=float).reshape(-1, 2)
    if len(velocities) == 0:
        return 0.0
    return float(np.linalg.norm(velocities, axis=1).mean())


def average_neighbors(positions: np.ndarray, radius: float) -> float:
    """
    Mean number of other boids strictly within ``radius`` of each boid.

    Builds the full pairwise distance matrix, so memory grows with n^2.
    """
    positions = np.asarray(positions, dtype=float).reshape(-1, 2)
    n = len(positions)
    if n == 0:
        return 0.0
    deltas = positions[:, None, :] - positions[None, :, :]
    distances = np.sqrt((deltas ** 2).sum(axis=2))
    within = distances < radius
    np.fill_diagonal(within, False)
    return float(within.sum(axis=1).mean())


def flock_statistics(flock: Flock) -> Dict[str, float]:
    """
    Collect every metric for the flock's current committed state.

    Returns:
        Dictionary with frame, boid_count, polarization, cohesion,
        avg_speed and avg_neighbors
    """
    positions = flock.positions()
    velocities = flock.velocities()
    return {
        "frame": flock.frame,
        "boid_count": len(flock),
        "polarization": polarization(velocities),
        "cohesion": cohesion(positions),
        "avg_speed": average_speed(velocities),
        "avg_neighbors": average_neighbors(positions, flock.config.neighborRadius),
    }
