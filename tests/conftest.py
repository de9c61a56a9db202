import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from hashbench.benchmark import BenchmarkHarness, build_default_registry


@pytest.fixture
def registry():
    """Registry whose fault source is seeded so failure counts are repeatable."""
    return build_default_registry(fault_rng=np.random.default_rng(1234))


@pytest.fixture
def harness(registry):
    return BenchmarkHarness(registry=registry)


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config into tmp_path and return its path."""
    def _write(text, name="bench.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
