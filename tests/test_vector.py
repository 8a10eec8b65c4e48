"""
Tests for the 2D vector helpers.
"""

import math

import pygame
import pytest

from swarm.core import vector


class TestArithmetic:
    """Tests for add, subtract, scale and length."""

    def test_add(self):
        """Components add pairwise."""
        assert vector.add(pygame.Vector2(1, 2), pygame.Vector2(3, -4)) == pygame.Vector2(4, -2)

    def test_subtract(self):
        """Components subtract pairwise."""
        assert vector.subtract(pygame.Vector2(1, 2), pygame.Vector2(3, -4)) == pygame.Vector2(-2, 6)

    def test_scale(self):
        """Scaling multiplies both components."""
        assert vector.scale(pygame.Vector2(1.5, -2), 2) == pygame.Vector2(3, -4)

    def test_length(self):
        """Length is the Euclidean norm."""
        assert vector.length(pygame.Vector2(3, 4)) == pytest.approx(5.0)

    def test_distance(self):
        """Distance is the length of the difference."""
        assert vector.distance(pygame.Vector2(1, 1), pygame.Vector2(4, 5)) == pytest.approx(5.0)

    def test_operations_do_not_mutate_inputs(self):
        """Helpers return new vectors."""
        a = pygame.Vector2(1, 2)
        b = pygame.Vector2(3, 4)
        vector.add(a, b)
        vector.scale(a, 10)
        assert a == pygame.Vector2(1, 2)
        assert b == pygame.Vector2(3, 4)


class TestZero:
    """Tests for the zero vector."""

    def test_zero_is_origin(self):
        """zero() is the origin."""
        assert vector.zero() == pygame.Vector2(0, 0)
        assert vector.length(vector.zero()) == 0

    def test_zero_returns_fresh_instances(self):
        """Mutating one zero vector does not affect the next."""
        first = vector.zero()
        first += pygame.Vector2(5, 5)
        assert vector.zero() == pygame.Vector2(0, 0)
        assert vector.ZERO == (0.0, 0.0)


class TestAngle:
    """Tests for the signed angle from the positive x-axis."""

    @pytest.mark.parametrize("x, y, expected", [
        (1, 0, 0.0),
        (0, 1, math.pi / 2),
        (-1, 0, math.pi),
        (0, -1, -math.pi / 2),
        (1, 1, math.pi / 4),
        (-1, 1, 3 * math.pi / 4),
        (-1, -1, -3 * math.pi / 4),
        (1, -1, -math.pi / 4),
    ])
    def test_all_quadrants(self, x, y, expected):
        """Angle matches atan2 in every quadrant."""
        assert vector.angle(pygame.Vector2(x, y)) == pytest.approx(expected)

    def test_zero_vector_angle(self):
        """The zero vector has angle 0."""
        assert vector.angle(vector.zero()) == 0.0
