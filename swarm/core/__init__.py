"""
Core module containing configuration, vector math, agents, neighbor
search and the flock stepper.
"""

from .errors import SwarmError, ConfigError, AssetError
from .config import FlockConfig, DEFAULT_CONFIG, BENCHMARK_CONFIG, load_config
from .agents import Agent, Boid, RULE_ORDER
from .spatial_grid import SpatialGrid
from .neighbors import BruteForceNeighbors, find_neighbors, make_neighbor_finder
from .flock import AgentView, Flock
from .population import create_flock, seed_population

__all__ = [
    'SwarmError', 'ConfigError', 'AssetError',
    'FlockConfig', 'DEFAULT_CONFIG', 'BENCHMARK_CONFIG', 'load_config',
    'Agent', 'Boid', 'RULE_ORDER',
    'SpatialGrid', 'BruteForceNeighbors', 'find_neighbors', 'make_neighbor_finder',
    'AgentView', 'Flock',
    'create_flock', 'seed_population',
]
