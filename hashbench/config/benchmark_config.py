# -*- coding: utf-8 -*-
"""
Benchmark configuration for the hash function harness.

This module loads benchmark parameters from external YAML configuration
files so that every run can be traced back to the parameters it used.
"""

import time
import yaml
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from pathlib import Path

from hashbench.errors import InvalidConfiguration


DEFAULT_OPERATIONS = ('SHA-256', 'MD5', 'FaultyOp')
DEFAULT_SIZES = (1, 10, 100, 1_000, 10_000)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    return Path(__file__).parent


def load_yaml_config(filename: str) -> dict:
    """Load configuration from YAML file with validation."""
    filepath = Path(filename)
    if not filepath.is_absolute() and not filepath.exists():
        filepath = get_config_dir() / filename

    if not filepath.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {filepath}\n"
            f"Please ensure the file exists or is present in {get_config_dir()}"
        )

    with open(filepath, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise InvalidConfiguration(f"Configuration file {filepath} is empty or not a mapping")

    return config


@dataclass(frozen=True)
class HarnessConfig:
    """Validated parameters for one harness run."""
    operations: Tuple[str, ...]
    sizes: Tuple[int, ...]
    iterations: int
    seed: int
    warmup_runs: int = 1
    track_memory: bool = False

    def __post_init__(self):
        """Validate harness parameters."""
        if not self.operations:
            raise InvalidConfiguration("At least one operation must be configured")
        if not self.sizes:
            raise InvalidConfiguration("At least one input size must be configured")
        for size in self.sizes:
            if isinstance(size, bool) or not isinstance(size, int) or size < 1:
                raise InvalidConfiguration(f"Input sizes must be positive integers, got {size!r}")
        if len(set(self.sizes)) != len(self.sizes):
            raise InvalidConfiguration(f"Input sizes must be unique, got {list(self.sizes)}")
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int) or self.iterations < 1:
            raise InvalidConfiguration(f"Iterations must be at least 1, got {self.iterations!r}")
        if isinstance(self.warmup_runs, bool) or not isinstance(self.warmup_runs, int) or self.warmup_runs < 0:
            raise InvalidConfiguration(f"Warm-up runs must be a non-negative integer, got {self.warmup_runs!r}")
        # Range accepted by np.random.RandomState
        if isinstance(self.seed, bool) or not isinstance(self.seed, int) or not (0 <= self.seed < 2**32):
            raise InvalidConfiguration(f"Seed must be an integer in [0, 2**32), got {self.seed!r}")

    @property
    def num_cases(self) -> int:
        """Number of (operation, size) cases in the cross-product."""
        return len(self.operations) * len(self.sizes)


class BenchmarkConfig:
    """Configuration manager for benchmark runs."""

    def __init__(self, config_file: str = "benchmark_config.yaml"):
        """Initialize benchmark configuration from YAML file."""
        self._config_file = config_file
        self._config = load_yaml_config(config_file)
        self._validate_config()
        self._load_parameters()

    def _validate_config(self):
        """Validate configuration structure."""
        required_sections = ['benchmark']
        for section in required_sections:
            if section not in self._config:
                raise InvalidConfiguration(f"Missing required section '{section}' in configuration")

        for section in ['benchmark', 'random_seed', 'statistics', 'output']:
            if section in self._config and not isinstance(self._config[section], dict):
                raise InvalidConfiguration(f"Section '{section}' must be a mapping, got {self._config[section]!r}")

        for key in ['operations', 'sizes']:
            value = self._config['benchmark'].get(key)
            if value is not None and not isinstance(value, list):
                raise InvalidConfiguration(f"'benchmark.{key}' must be a list, got {value!r}")

        confidence = self._config.get('statistics', {}).get('confidence_level', 0.95)
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)) or not (0 < confidence < 1):
            raise InvalidConfiguration(
                f"Confidence level must be in (0, 1), got {confidence}"
            )

    def _load_parameters(self):
        """Load parameters from configuration."""
        bench = self._config['benchmark']

        self.operations = tuple(bench.get('operations', DEFAULT_OPERATIONS))
        self.sizes = tuple(bench.get('sizes', DEFAULT_SIZES))
        self.iterations = bench.get('iterations', 100)
        self.warmup_runs = bench.get('warmup_runs', 1)
        self.track_memory = bool(bench.get('track_memory', False))

        # Statistics parameters
        statistics = self._config.get('statistics', {})
        self.confidence_level = statistics.get('confidence_level', 0.95)
        self.remove_outliers = bool(statistics.get('remove_outliers', False))

        # Output parameters
        output = self._config.get('output') or {}
        self.results_file: Optional[str] = output.get('results_file')
        self.figures_dir: Optional[str] = output.get('figures_dir')

    def harness_config(self, seed_arg: Optional[str] = None) -> HarnessConfig:
        """Build the validated harness configuration."""
        return HarnessConfig(
            operations=self.operations,
            sizes=self.sizes,
            iterations=self.iterations,
            seed=self.get_random_seed(seed_arg),
            warmup_runs=self.warmup_runs,
            track_memory=self.track_memory
        )

    def get_random_seed_config(self) -> Dict:
        """Get random seed configuration."""
        return self._config.get('random_seed', {
            'mode': 'fixed',
            'fixed_value': 42
        })

    def get_random_seed(self, seed_arg: Optional[str] = None) -> int:
        """Determine input buffer seed from an optional argument or the configuration."""
        if seed_arg is not None:
            if str(seed_arg).lower() == 'time':
                return int(time.time())
            try:
                return int(seed_arg)
            except ValueError:
                raise InvalidConfiguration(f"Seed must be an integer or 'time', got {seed_arg!r}")

        seed_config = self.get_random_seed_config()
        if seed_config.get('mode', 'fixed') == 'time_based':
            return int(time.time())

        return seed_config.get('fixed_value', 42)

    def get_config_source(self) -> str:
        """Return the source file for configuration traceability."""
        return str(self._config_file)
