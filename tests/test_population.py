"""
Tests for population seeding.
"""

import random

import pytest

from swarm.core.config import FlockConfig
from swarm.core.errors import ConfigError
from swarm.core.flock import Flock
from swarm.core.population import create_flock, seed_population


class TestSeedPopulation:
    """Tests for seed_population()."""

    def test_count_and_indices(self):
        """One boid per slot, indexed 0..n-1."""
        boids = seed_population(FlockConfig(boidCount=25, seed=1))
        assert [b.index for b in boids] == list(range(25))

    def test_reference_ranges(self):
        """Velocities are integers in [0, 9], positions in [0, 799]."""
        boids = seed_population(FlockConfig(boidCount=500, seed=3))
        for boid in boids:
            for component in (boid.velocity.x, boid.velocity.y):
                assert component == int(component)
                assert 0 <= component <= 9
            for component in (boid.position.x, boid.position.y):
                assert component == int(component)
                assert 0 <= component <= 799
            assert boid.heading == 0.0

    def test_draw_order(self):
        """Each boid draws vx, vy, x, y in that order."""
        config = FlockConfig(boidCount=3)
        boids = seed_population(config, random.Random(21))

        expected = random.Random(21)
        for boid in boids:
            vx, vy = expected.randrange(10), expected.randrange(10)
            x, y = expected.randrange(800), expected.randrange(800)
            assert (boid.velocity.x, boid.velocity.y) == (vx, vy)
            assert (boid.position.x, boid.position.y) == (x, y)

    def test_seed_is_reproducible(self):
        """The config seed fixes the population."""
        config = FlockConfig(boidCount=40, seed=8)
        first = [(b.position.x, b.position.y, b.velocity.x, b.velocity.y) for b in seed_population(config)]
        second = [(b.position.x, b.position.y, b.velocity.x, b.velocity.y) for b in seed_population(config)]
        assert first == second

    def test_custom_ranges(self):
        """Smaller worlds and speed ranges are honored."""
        boids = seed_population(FlockConfig(boidCount=100, boundMax=50, initialSpeedRange=3, seed=2))
        assert max(max(b.position.x, b.position.y) for b in boids) <= 49
        assert max(max(b.velocity.x, b.velocity.y) for b in boids) <= 2

    def test_boids_share_config(self):
        """Every boid reads the same config object."""
        config = FlockConfig(boidCount=5, seed=1)
        assert all(b.config is config for b in seed_population(config))


class TestCreateFlock:
    """Tests for create_flock()."""

    def test_builds_flock(self):
        """A validated config gives a flock at frame 0."""
        flock = create_flock(FlockConfig(boidCount=10, seed=1))
        assert isinstance(flock, Flock)
        assert len(flock) == 10
        assert flock.frame == 0

    def test_invalid_config(self):
        """Invalid configs are rejected before seeding."""
        with pytest.raises(ConfigError):
            create_flock(FlockConfig(neighborRadius=-1))

    def test_empty_population(self):
        """Zero boids is a valid, if dull, flock."""
        flock = create_flock(FlockConfig(boidCount=0))
        flock.step()
        assert len(flock) == 0
