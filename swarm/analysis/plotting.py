"""
Plotting functions for visualizing flock metrics.
"""

import logging
from typing import Any, Dict

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

logger = logging.getLogger(__name__)

RUN_COLORS = ['#FF6B6B', '#4ECDC4', '#FFB347', '#95E1D3']

METRIC_LABELS = {
    "polarization": "Polarization (1 = fully aligned)",
    "cohesion": "Cohesion (avg dist to centroid)",
    "avg_speed": "Average speed",
    "avg_neighbors": "Average neighbor count",
}


def plot_metric_timeseries(runs: Dict[str, Dict[str, Any]], metric: str = "polarization",
                           output_file: str = "flock_polarization.png") -> str:
    """
    Plot one metric over time for each run.

    Args:
        runs: Mapping of run name to results (each with a "metrics_over_time" list)
        metric: Key of the metric to plot
        output_file: Output filename for the plot

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots(figsize=(12, 7))

    for idx, (name, result) in enumerate(runs.items()):
        series = result["metrics_over_time"]
        frames = [d["frame"] for d in series]
        values = [d[metric] for d in series]
        color = RUN_COLORS[idx % len(RUN_COLORS)]

        ax.plot(frames, values, label=name, linewidth=2, color=color, alpha=0.85)
        if values:
            ax.annotate(f'{values[-1]:.2f}', xy=(frames[-1], values[-1]),
                        xytext=(5, 0), textcoords='offset points',
                        fontsize=9, color=color)

    ax.set_xlabel('Frame Number', fontsize=12, fontweight='bold')
    ax.set_ylabel(METRIC_LABELS.get(metric, metric), fontsize=12, fontweight='bold')
    ax.set_title(f'Flock {metric.replace("_", " ")} over time', fontsize=14, fontweight='bold', pad=20)
    ax.legend(fontsize=11, loc='lower right', framealpha=0.9)
    ax.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)

    logger.info("Plot saved to: %s", output_file)
    return output_file
