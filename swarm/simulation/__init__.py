"""
Simulation module containing the interactive window, headless benchmark
and rendering helpers.
"""

from .render import BoidRenderer, load_sprite
from .interactive import Simulation
from .benchmark import BenchmarkSimulation, compare_neighbor_search

__all__ = ['BoidRenderer', 'load_sprite', 'Simulation', 'BenchmarkSimulation', 'compare_neighbor_search']
