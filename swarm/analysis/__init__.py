"""
Analysis module for flock metrics, plotting and exporting results.
"""

from .metrics import polarization, cohesion, average_speed, average_neighbors, flock_statistics
from .plotting import plot_metric_timeseries
from .export import export_metrics_to_csv, export_report, calculate_aggregate_stats

__all__ = [
    'polarization',
    'cohesion',
    'average_speed',
    'average_neighbors',
    'flock_statistics',
    'plot_metric_timeseries',
    'export_metrics_to_csv',
    'export_report',
    'calculate_aggregate_stats',
]
