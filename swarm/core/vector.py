"""
2D vector helpers built on pygame.Vector2.

pygame vectors mutate in place under ``+=`` and ``*=``, so the zero vector is
kept as an immutable tuple and ``zero()`` hands out fresh instances.
"""

import math
from typing import Tuple

import pygame

Vector2 = pygame.Vector2

ZERO: Tuple[float, float] = (0.0, 0.0)


def zero() -> pygame.Vector2:
    """Return a new zero vector."""
    return pygame.Vector2(ZERO)


def add(a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
    return a + b


def subtract(a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
    return a - b


def scale(v: pygame.Vector2, scalar: float) -> pygame.Vector2:
    return v * scalar


def length(v: pygame.Vector2) -> float:
    """Euclidean norm of ``v``."""
    return v.length()


def distance(a: pygame.Vector2, b: pygame.Vector2) -> float:
    return a.distance_to(b)


def angle(v: pygame.Vector2) -> float:
    """
    Signed angle of ``v`` from the positive x-axis, in radians.

    Uses atan2 so the result is consistent across all four quadrants and
    falls in (-pi, pi]. The zero vector has angle 0.
    """
    return math.atan2(v.y, v.x)
