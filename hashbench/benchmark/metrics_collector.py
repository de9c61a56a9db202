# -*- coding: utf-8 -*-
"""Metric Collector Module for aggregating benchmark measurements into a report."""

import numpy as np
from scipy import stats
from dataclasses import dataclass
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional

from hashbench.benchmark.measurement import BenchmarkCase, MeasurementSet


@dataclass(frozen=True)
class CaseSummary:
    """Aggregated statistics for one benchmark case."""
    case: BenchmarkCase
    count: int
    successes: int
    failures: int

    # Timing statistics over successful invocations (ms)
    mean_ms: float
    min_ms: float
    max_ms: float
    std_ms: float
    median_ms: float
    ci_lower_ms: float  # CI lower bound of the mean
    ci_upper_ms: float  # CI upper bound of the mean

    memory_peak_kb_mean: Optional[float] = None

    @property
    def failure_rate(self) -> float:
        return self.failures / self.count if self.count else 0.0

    def get_summary_dict(self) -> Dict:
        """Return summary dictionary."""
        return {
            'operation': self.case.operation,
            'size': self.case.size,
            'count': self.count,
            'successes': self.successes,
            'failures': self.failures,
            'mean_ms': self.mean_ms,
            'min_ms': self.min_ms,
            'max_ms': self.max_ms,
            'std_ms': self.std_ms,
            'median_ms': self.median_ms,
            'ci_lower_ms': self.ci_lower_ms,
            'ci_upper_ms': self.ci_upper_ms,
            'memory_peak_kb_mean': self.memory_peak_kb_mean
        }


class Report(Mapping):
    """Read-only mapping from benchmark case to its summary."""

    def __init__(self, summaries: Dict[BenchmarkCase, CaseSummary]):
        self._summaries = MappingProxyType(dict(summaries))

    def __getitem__(self, case: BenchmarkCase) -> CaseSummary:
        return self._summaries[case]

    def __iter__(self) -> Iterator[BenchmarkCase]:
        return iter(self._summaries)

    def __len__(self) -> int:
        return len(self._summaries)

    @property
    def operations(self) -> List[str]:
        """Operation names in run order."""
        seen = []
        for case in self._summaries:
            if case.operation not in seen:
                seen.append(case.operation)
        return seen

    @property
    def sizes(self) -> List[int]:
        """Input sizes in run order."""
        seen = []
        for case in self._summaries:
            if case.size not in seen:
                seen.append(case.size)
        return seen

    def fastest(self, size: int) -> Optional[CaseSummary]:
        """Summary with the lowest mean time at one input size, ignoring cases without successes."""
        candidates = [s for c, s in self._summaries.items()
                      if c.size == size and s.successes > 0]
        if not candidates:
            return None
        return min(candidates, key=lambda s: s.mean_ms)

    def to_rows(self) -> List[Dict]:
        return [summary.get_summary_dict() for summary in self._summaries.values()]

    def __repr__(self) -> str:
        return f"Report({len(self)} cases)"


class MetricsCollector:
    """Collector that turns measurement sets into case summaries."""

    def __init__(self, confidence_level: float = 0.95, remove_outliers: bool = False):
        """Initialize collector with confidence level."""
        if not (0 < confidence_level < 1):
            raise ValueError(f"Confidence level must be in (0, 1), got {confidence_level}")
        self.confidence_level = confidence_level
        self.remove_outliers = remove_outliers
        self.z_score = stats.norm.ppf((1 + confidence_level) / 2)

    def summarize(self, measurement_set: MeasurementSet) -> CaseSummary:
        """Aggregate one measurement set; timing only covers successful invocations."""
        count = len(measurement_set)
        failures = measurement_set.failure_count
        successes = count - failures

        times = measurement_set.elapsed_times(successful_only=True)

        # Remove outliers using IQR
        if self.remove_outliers and len(times) > 5:
            times = self._remove_outliers(times)

        n = len(times)
        if n == 0:
            mean = min_t = max_t = std = median = ci_lower = ci_upper = float('nan')
        else:
            min_t = float(np.min(times))
            max_t = float(np.max(times))
            # Summation rounding can push the mean of near-equal samples past the extremes
            mean = float(np.clip(np.mean(times), min_t, max_t))
            std = float(np.std(times, ddof=1)) if n > 1 else 0.0
            median = float(np.median(times))
            ci = self.z_score * std / np.sqrt(n)
            ci_lower = mean - ci
            ci_upper = mean + ci

        memory_values = [m.memory_peak_kb for m in measurement_set.successes
                         if m.memory_peak_kb is not None]
        memory_mean = float(np.mean(memory_values)) if memory_values else None

        return CaseSummary(
            case=measurement_set.case,
            count=count,
            successes=successes,
            failures=failures,
            mean_ms=mean,
            min_ms=min_t,
            max_ms=max_t,
            std_ms=std,
            median_ms=median,
            ci_lower_ms=ci_lower,
            ci_upper_ms=ci_upper,
            memory_peak_kb_mean=memory_mean
        )

    def _remove_outliers(self, data: np.ndarray) -> np.ndarray:
        """Remove outliers using IQR method."""
        q1 = np.percentile(data, 25)
        q3 = np.percentile(data, 75)
        iqr = q3 - q1
        lower_bound = q1 - 1.5 * iqr
        upper_bound = q3 + 1.5 * iqr

        return data[(data >= lower_bound) & (data <= upper_bound)]

    def build_report(self, measurement_sets: Dict[BenchmarkCase, MeasurementSet]) -> Report:
        """Aggregate all measurement sets, keeping their order."""
        return Report({
            case: self.summarize(measurement_set)
            for case, measurement_set in measurement_sets.items()
        })
