"""
Agent classes for the flocking simulation.
"""

from .base import Agent
from .boid import Boid, RULE_ORDER

__all__ = ['Agent', 'Boid', 'RULE_ORDER']
