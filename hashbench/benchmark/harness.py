# -*- coding: utf-8 -*-
"""Benchmark harness: warm-up, timed iterations and aggregation per case."""

import time
import tracemalloc
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Sequence

from hashbench.benchmark.measurement import (
    BenchmarkCase,
    Measurement,
    MeasurementSet,
    generate_input_buffer
)
from hashbench.benchmark.metrics_collector import MetricsCollector, Report
from hashbench.benchmark.operations import Operation, build_default_registry
from hashbench.config.benchmark_config import HarnessConfig
from hashbench.errors import InvalidConfiguration, NoReportAvailable


class BenchmarkHarness:
    """Runs every configured (operation, size) case sequentially.

    Usage::

        harness = BenchmarkHarness()
        harness.configure({'SHA-256', 'MD5'}, [1, 10], iterations=5, seed=42)
        report = harness.run()
    """

    def __init__(self, registry: Optional[Dict[str, Operation]] = None,
                 collector: Optional[MetricsCollector] = None,
                 verbose: bool = False):
        """Initialize harness with an operation registry."""
        self.registry = registry if registry is not None else build_default_registry()
        self.collector = collector or MetricsCollector()
        self.verbose = verbose

        self.config: Optional[HarnessConfig] = None
        self._report: Optional[Report] = None
        self._measurement_sets: Optional[Dict[BenchmarkCase, MeasurementSet]] = None

    def configure(self, operations: Iterable[str], sizes: Sequence[int],
                  iterations: int, seed: int, warmup_runs: int = 1,
                  track_memory: bool = False) -> HarnessConfig:
        """Validate and store the run parameters."""
        self.config = None
        requested = set(operations)
        unknown = sorted(requested - set(self.registry))
        if unknown:
            raise InvalidConfiguration(
                f"Unknown operations {unknown}, available: {list(self.registry)}"
            )

        # Registry order, not caller order, so runs are comparable
        ordered = tuple(name for name in self.registry if name in requested)

        self.config = HarnessConfig(
            operations=ordered,
            sizes=tuple(sizes),
            iterations=iterations,
            seed=seed,
            warmup_runs=warmup_runs,
            track_memory=track_memory
        )
        return self.config

    def apply_config(self, config: HarnessConfig) -> HarnessConfig:
        """Configure from an already built HarnessConfig."""
        return self.configure(
            config.operations, config.sizes, config.iterations, config.seed,
            warmup_runs=config.warmup_runs, track_memory=config.track_memory
        )

    def cases(self) -> List[BenchmarkCase]:
        """Cases of the current configuration in run order."""
        if self.config is None:
            raise InvalidConfiguration("Harness has not been configured")
        return [BenchmarkCase(op, n)
                for op in self.config.operations
                for n in self.config.sizes]

    def run(self) -> Report:
        """Run all cases and build the report."""
        cases = self.cases()
        cfg = self.config

        measurement_sets = OrderedDict()
        for case in cases:
            if self.verbose:
                print(f"  Running {case.label}...")
            measurement_sets[case] = self._run_case(case, cfg)

        self._measurement_sets = measurement_sets
        self._report = self.collector.build_report(measurement_sets)
        return self._report

    def report(self) -> Report:
        """Return the last computed report."""
        if self._report is None:
            raise NoReportAvailable("No report available, call run() first")
        return self._report

    def measurement_sets(self) -> Dict[BenchmarkCase, MeasurementSet]:
        """Return the raw measurement sets of the last run."""
        if self._measurement_sets is None:
            raise NoReportAvailable("No measurements available, call run() first")
        return dict(self._measurement_sets)

    def _run_case(self, case: BenchmarkCase, cfg: HarnessConfig) -> MeasurementSet:
        """Warm up, then time `iterations` invocations over a fresh buffer."""
        operation = self.registry[case.operation]
        data = generate_input_buffer(case.size, cfg.seed)

        for _ in range(cfg.warmup_runs):
            self._invoke(operation, case, data, track_memory=False)

        measurement_set = MeasurementSet(case)
        # Leave tracing alone if the caller already started it
        owns_tracing = cfg.track_memory and not tracemalloc.is_tracing()
        if owns_tracing:
            tracemalloc.start()
        try:
            for _ in range(cfg.iterations):
                measurement_set.add(
                    self._invoke(operation, case, data, track_memory=cfg.track_memory)
                )
        finally:
            if owns_tracing:
                tracemalloc.stop()

        return measurement_set

    def _invoke(self, operation: Operation, case: BenchmarkCase, data: bytes,
                track_memory: bool) -> Measurement:
        """Invoke the operation once and record the outcome."""
        if track_memory:
            tracemalloc.reset_peak()
            baseline, _ = tracemalloc.get_traced_memory()

        error = None
        start = time.perf_counter()
        try:
            operation(data)
        except Exception as exc:
            error = str(exc) or type(exc).__name__
        end = time.perf_counter()

        memory_peak_kb = None
        if track_memory:
            _, peak = tracemalloc.get_traced_memory()
            memory_peak_kb = max(0, peak - baseline) / 1024

        return Measurement(
            case=case,
            elapsed_ms=(end - start) * 1000,
            success=error is None,
            error=error,
            memory_peak_kb=memory_peak_kb
        )
