# -*- coding: utf-8 -*-
"""JSON persistence for raw benchmark measurements."""

import json
from collections import OrderedDict
from typing import Dict

from hashbench.benchmark.measurement import BenchmarkCase, Measurement, MeasurementSet


def save_measurements(measurement_sets: Dict[BenchmarkCase, MeasurementSet],
                      filepath: str):
    """Save measurement sets to JSON file, grouped by operation then size."""
    serializable = {}
    for case, measurement_set in measurement_sets.items():
        by_size = serializable.setdefault(case.operation, {})
        by_size[str(case.size)] = [m.to_dict() for m in measurement_set]

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(serializable, f, indent=2)


def load_measurements(filepath: str) -> Dict[BenchmarkCase, MeasurementSet]:
    """Load measurement sets from JSON file."""
    with open(filepath, 'r', encoding='utf-8') as f:
        data = json.load(f)

    results = OrderedDict()
    for operation, size_data in data.items():
        for size_str, measurements in size_data.items():
            case = BenchmarkCase(operation, int(size_str))
            measurement_set = MeasurementSet(case)
            for m in measurements:
                measurement_set.add(Measurement.from_dict(m))
            results[case] = measurement_set

    return results
