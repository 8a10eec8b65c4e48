"""
Main entry point for the flocking simulation.

Run with:
    python -m swarm.main              # Interactive simulation
    python -m swarm.main --benchmark  # Headless benchmark of update modes and neighbor search
"""

import logging
import os
import sys


# Set dummy video driver for headless benchmarking
def set_headless():
    """Enable headless mode for benchmarking."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def build_config(args):
    """Combine defaults, an optional JSON config file and command-line overrides."""
    from .core.config import DEFAULT_CONFIG, BENCHMARK_CONFIG, load_config

    base = BENCHMARK_CONFIG if args.benchmark else DEFAULT_CONFIG
    config = load_config(args.config, base) if args.config else base

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.boids is not None:
        overrides["boidCount"] = args.boids
    if args.update_mode:
        overrides["updateMode"] = args.update_mode
    if args.neighbor_search:
        overrides["neighborSearch"] = args.neighbor_search
    if args.sprite:
        overrides["spritePath"] = args.sprite

    return config.with_overrides(**overrides).validate()


def run_interactive(config):
    """Run the interactive simulation with GUI."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Swarm - Boids Flocking Simulation")
    print("=" * 60)
    print("\nControls:")
    print("  ESC   - Quit")
    print("  G     - Toggle neighborhood grid")
    print("  SPACE - Save flock metrics to JSON")
    print(f"\n{config.boidCount} boids, {config.updateMode} update, {config.neighborSearch} neighbor search")
    print("\nStarting simulation...")

    Simulation(config).run()


def run_benchmark(config, duration: int = 1000, record_video: bool = False):
    """
    Run the headless comparison of update modes and neighbor search.

    Args:
        config: Base configuration (its seed is shared by every run)
        duration: Duration in frames per run
        record_video: Whether to record a video of the first run
    """
    set_headless()

    from .simulation.benchmark import BenchmarkSimulation, compare_neighbor_search
    from .analysis.export import export_metrics_to_csv, export_report
    from .analysis.plotting import plot_metric_timeseries

    print("=" * 60)
    print("FLOCK BENCHMARK")
    print("=" * 60)
    print(f"Duration per run: {duration} frames")
    print(f"Boids: {config.boidCount}, seed: {config.seed}")
    print()

    runs = {}
    for i, mode in enumerate(("sequential", "simultaneous")):
        print(f"\n{'=' * 60}")
        print(f"Update mode: {mode}")
        print(f"{'=' * 60}")

        video_file = f"recording_{mode}.mp4" if record_video and i == 0 else None
        sim = BenchmarkSimulation(config.with_overrides(updateMode=mode),
                                  enable_video=video_file is not None, video_filename=video_file)
        runs[mode] = sim.run_benchmark(duration)

    print(f"\n{'=' * 60}")
    print("Neighbor search: brute vs grid")
    print(f"{'=' * 60}")
    search = compare_neighbor_search(config, duration)

    report = {
        "benchmark_config": {"duration_frames": duration, "config": config.to_dict()},
        "update_modes": runs,
        "neighbor_search": search,
    }

    export_report(report)
    export_metrics_to_csv(runs)

    print("\n" + "=" * 60)
    print("BENCHMARK RESULTS SUMMARY")
    print("=" * 60)
    for name, result in runs.items():
        print(f"\n{name.upper()}:")
        print(f"   Frames/s: {result['frames_per_second']:.1f}")
        print(f"   Polarization: {result['final_polarization']:.3f}")
        print(f"   Cohesion: {result['final_cohesion']:.1f}")
        print(f"   Avg Neighbors: {result['final_avg_neighbors']:.1f}")

    print(f"\nGrid search identical to brute force: {'YES' if search['identical'] else 'NO'}")
    print(f"Grid search speedup: {search['speedup']:.2f}x")

    print("\nGenerating polarization plot...")
    plot_metric_timeseries(runs, "polarization")

    return report


def main(argv=None):
    """Main entry point."""
    import argparse

    from .core.errors import SwarmError

    parser = argparse.ArgumentParser(description="Boids flocking simulation")
    parser.add_argument("--benchmark", action="store_true", help="Run headless benchmark comparison")
    parser.add_argument("--config", help="JSON file with config overrides")
    parser.add_argument("--seed", type=int, help="Random seed for the initial population")
    parser.add_argument("--boids", type=int, help="Number of boids")
    parser.add_argument("--duration", type=int, default=1000, help="Benchmark duration in frames")
    parser.add_argument("--update-mode", choices=["sequential", "simultaneous"], help="Flock update mode")
    parser.add_argument("--neighbor-search", choices=["brute", "grid"], help="Neighbor search strategy")
    parser.add_argument("--sprite", help="Image file to draw each boid with")
    parser.add_argument("--record-video", action="store_true", help="Record video during benchmark")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        if args.benchmark:
            run_benchmark(config, duration=args.duration, record_video=args.record_video)
        else:
            run_interactive(config)
    except SwarmError as e:
        logging.getLogger("swarm").error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
