# -*- coding: utf-8 -*-
"""Measurement data classes and input buffer generation."""

import time
import numpy as np
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


def generate_input_buffer(size: int, seed: int) -> bytes:
    """Generate `size` pseudo-random bytes, identical for the same seed."""
    if size < 0:
        raise ValueError(f"Buffer size cannot be negative, got {size}")
    rng = np.random.RandomState(seed)
    return rng.bytes(size)


@dataclass(frozen=True)
class BenchmarkCase:
    """One operation under test bound to one input size."""
    operation: str
    size: int

    @property
    def label(self) -> str:
        return f"{self.operation} (N={self.size})"


@dataclass(frozen=True)
class Measurement:
    """Outcome of a single timed invocation."""
    case: BenchmarkCase
    elapsed_ms: float                       # Wall-clock time (ms)
    success: bool
    error: Optional[str] = None
    memory_peak_kb: Optional[float] = None  # Only set when memory tracking is on
    timestamp: float = field(default_factory=time.time)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'operation': self.case.operation,
            'size': self.case.size,
            'elapsed_ms': self.elapsed_ms,
            'success': self.success,
            'error': self.error,
            'memory_peak_kb': self.memory_peak_kb,
            'timestamp': self.timestamp
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Measurement':
        return cls(
            case=BenchmarkCase(data['operation'], int(data['size'])),
            elapsed_ms=float(data['elapsed_ms']),
            success=bool(data['success']),
            error=data.get('error'),
            memory_peak_kb=data.get('memory_peak_kb'),
            timestamp=data.get('timestamp', time.time())
        )


class MeasurementSet:
    """Ordered measurements that all belong to the same benchmark case."""

    def __init__(self, case: BenchmarkCase):
        self.case = case
        self._measurements: List[Measurement] = []

    def add(self, measurement: Measurement):
        """Append a measurement, rejecting ones from another case."""
        if measurement.case != self.case:
            raise ValueError(
                f"Measurement for {measurement.case.label} does not belong to {self.case.label}"
            )
        self._measurements.append(measurement)

    @property
    def measurements(self) -> List[Measurement]:
        return list(self._measurements)

    @property
    def successes(self) -> List[Measurement]:
        return [m for m in self._measurements if m.success]

    @property
    def failure_count(self) -> int:
        return sum(1 for m in self._measurements if not m.success)

    def elapsed_times(self, successful_only: bool = True) -> np.ndarray:
        """Elapsed times (ms) as an array."""
        source = self.successes if successful_only else self._measurements
        return np.array([m.elapsed_ms for m in source], dtype=float)

    def __len__(self) -> int:
        return len(self._measurements)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(self._measurements)

    def __repr__(self) -> str:
        return f"MeasurementSet({self.case.label}, n={len(self)})"
