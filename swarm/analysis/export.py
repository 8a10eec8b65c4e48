"""
Export functions for saving simulation metrics to CSV and JSON.
"""

import csv
import json
import logging
import math
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

METRIC_FIELDS = ["frame", "boid_count", "polarization", "cohesion", "avg_speed", "avg_neighbors"]

AGGREGATE_METRICS = [
    "frames", "elapsed_time_seconds", "frames_per_second",
    "final_polarization", "final_cohesion", "final_avg_speed", "final_avg_neighbors",
]


def export_metrics_to_csv(runs: Dict[str, Dict[str, Any]],
                          filename: str = "flock_metrics.csv") -> str:
    """
    Export metric time series of one or more runs to CSV format.

    Args:
        runs: Mapping of run name to results (each with a "metrics_over_time" list)
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=["run"] + METRIC_FIELDS)
        writer.writeheader()

        for name, result in runs.items():
            for entry in result["metrics_over_time"]:
                row = {"run": name}
                row.update({k: entry.get(k, '') for k in METRIC_FIELDS})
                writer.writerow(row)

    logger.info("CSV results saved to: %s", filename)
    return filename


def export_report(report: Dict[str, Any], filename: str = "flock_benchmark_results.json") -> str:
    """
    Export a full benchmark report to JSON.

    Args:
        report: Complete results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(report, f, indent=2)

    logger.info("Benchmark report saved to: %s", filename)
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials

    Returns:
        Dictionary with ``<metric>_mean`` and ``<metric>_std`` for each metric
    """
    if not trial_results:
        return {}

    aggregates = {}

    for metric in AGGREGATE_METRICS:
        values = [r[metric] for r in trial_results if r.get(metric) is not None]
        if values:
            mean = sum(values) / len(values)
            aggregates[f"{metric}_mean"] = mean
            if len(values) > 1:
                variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
                aggregates[f"{metric}_std"] = math.sqrt(variance)
            else:
                aggregates[f"{metric}_std"] = 0

    return aggregates
