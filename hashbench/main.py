# -*- coding: utf-8 -*-
"""
Main entry point for the hash benchmark.
Runs the configured suite and prints the report tables.

Usage: hashbench [config.yaml] [seed|time]
"""

import math
import os
import sys
from typing import List, Optional

from hashbench.benchmark import BenchmarkHarness, MetricsCollector, Report, save_measurements
from hashbench.config.benchmark_config import BenchmarkConfig
from hashbench.errors import InvalidConfiguration


def print_header(title):
    print("\n" + "=" * 80)
    print(f"{title:^80}")
    print("=" * 80)


def _fmt(value: float) -> str:
    return 'n/a' if value is None or math.isnan(value) else f"{value * 1000:.3f}"


def print_report(report: Report, show_memory: bool = False):
    print("\nTable 1: Time per call (us) over successful iterations")
    print("-" * 100)
    header = (f"{'Operation':<10} {'N':>8} {'Mean':>10} {'Min':>10} {'Max':>10} "
              f"{'Std':>10} {'CI95 +/-':>10} {'Success':>8} {'Failed':>7}")
    if show_memory:
        header += f" {'Mem (KB)':>9}"
    print(header)
    print("-" * 100)

    for case, s in report.items():
        ci = s.ci_upper_ms - s.mean_ms
        row = (f"{case.operation:<10} {case.size:>8} {_fmt(s.mean_ms):>10} {_fmt(s.min_ms):>10} "
               f"{_fmt(s.max_ms):>10} {_fmt(s.std_ms):>10} {_fmt(ci):>10} "
               f"{s.successes:>8} {s.failures:>7}")
        if show_memory:
            mem = 'n/a' if s.memory_peak_kb_mean is None else f"{s.memory_peak_kb_mean:.2f}"
            row += f" {mem:>9}"
        print(row)

    print("\n\nTable 2: Fastest operation per input size")
    print("-" * 100)
    print(f"{'N':>8} {'Operation':<10} {'Mean (us)':>10}")
    print("-" * 100)
    for size in report.sizes:
        fastest = report.fastest(size)
        if fastest is None:
            print(f"{size:>8} {'-':<10} {'n/a':>10}")
        else:
            print(f"{size:>8} {fastest.case.operation:<10} {_fmt(fastest.mean_ms):>10}")


def run_benchmark(config: BenchmarkConfig, seed_arg: Optional[str] = None,
                  verbose: bool = True) -> BenchmarkHarness:
    """Configure and run a harness from a loaded configuration."""
    harness_config = config.harness_config(seed_arg)
    collector = MetricsCollector(
        confidence_level=config.confidence_level,
        remove_outliers=config.remove_outliers
    )
    harness = BenchmarkHarness(collector=collector, verbose=verbose)
    harness.apply_config(harness_config)

    print_header("Running Hash Benchmark")
    print(f"Config: {config.get_config_source()}")
    print(f"Seed: {harness_config.seed}, iterations: {harness_config.iterations}, "
          f"warm-up: {harness_config.warmup_runs}, cases: {harness_config.num_cases}")
    harness.run()
    return harness


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    config_file = argv[0] if len(argv) > 0 else 'benchmark_config.yaml'
    seed_arg = argv[1] if len(argv) > 1 else None

    try:
        config = BenchmarkConfig(config_file)
        harness = run_benchmark(config, seed_arg)
    except (InvalidConfiguration, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    report = harness.report()
    print_header("Benchmark Report")
    print_report(report, show_memory=config.track_memory)

    if config.results_file:
        save_measurements(harness.measurement_sets(), config.results_file)
        print(f"\nMeasurements saved to: {config.results_file}")

    if config.figures_dir:
        from hashbench.visualization import FigureGenerator

        print_header("Generating Figures")
        os.makedirs(config.figures_dir, exist_ok=True)
        FigureGenerator(config.figures_dir).generate_all_figures(report)
        print(f"\nFigures saved to: {config.figures_dir}")

    print("\nDone.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
