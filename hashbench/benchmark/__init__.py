# -*- coding: utf-8 -*-
"""Benchmark module for timing hash operations over seeded input buffers."""

from .measurement import (
    BenchmarkCase,
    Measurement,
    MeasurementSet,
    generate_input_buffer
)
from .operations import (
    Operation,
    HashOperation,
    FaultyOperation,
    build_default_registry
)
from .metrics_collector import (
    CaseSummary,
    MetricsCollector,
    Report
)
from .harness import BenchmarkHarness
from .storage import save_measurements, load_measurements

__all__ = [
    'BenchmarkCase',
    'Measurement',
    'MeasurementSet',
    'generate_input_buffer',
    'Operation',
    'HashOperation',
    'FaultyOperation',
    'build_default_registry',
    'CaseSummary',
    'MetricsCollector',
    'Report',
    'BenchmarkHarness',
    'save_measurements',
    'load_measurements'
]
