import math

import pytest

from hashbench.benchmark.measurement import BenchmarkCase, Measurement, MeasurementSet
from hashbench.benchmark.metrics_collector import MetricsCollector


def _make_set(case, times, failures=0):
    mset = MeasurementSet(case)
    for t in times:
        mset.add(Measurement(case, t, True))
    for _ in range(failures):
        mset.add(Measurement(case, 99.0, False, error="boom"))
    return mset


def test_summary_uses_successful_measurements_only():
    case = BenchmarkCase("FaultyOp", 1)
    summary = MetricsCollector().summarize(_make_set(case, [1.0, 2.0, 3.0], failures=2))
    assert summary.count == 5
    assert summary.successes == 3
    assert summary.failures == 2
    assert summary.mean_ms == pytest.approx(2.0)
    assert summary.min_ms == 1.0
    assert summary.max_ms == 3.0
    assert summary.median_ms == 2.0
    assert summary.ci_lower_ms < summary.mean_ms < summary.ci_upper_ms
    assert summary.failure_rate == pytest.approx(0.4)


def test_mean_stays_within_min_and_max_for_equal_samples():
    case = BenchmarkCase("MD5", 1)
    summary = MetricsCollector().summarize(_make_set(case, [0.1] * 7))
    assert summary.min_ms <= summary.mean_ms <= summary.max_ms
    assert summary.std_ms == pytest.approx(0.0)


def test_all_failed_case_has_nan_timings():
    case = BenchmarkCase("FaultyOp", 1)
    summary = MetricsCollector().summarize(_make_set(case, [], failures=3))
    assert summary.successes == 0
    assert summary.failures == 3
    assert math.isnan(summary.mean_ms)
    assert math.isnan(summary.min_ms)


def test_outlier_removal_keeps_counts():
    case = BenchmarkCase("SHA-256", 10)
    times = [1.0, 1.1, 0.9, 1.0, 1.05, 0.95, 50.0]
    summary = MetricsCollector(remove_outliers=True).summarize(_make_set(case, times))
    assert summary.successes == 7
    assert summary.max_ms < 50.0


def test_invalid_confidence_level():
    with pytest.raises(ValueError):
        MetricsCollector(confidence_level=1.5)


def test_report_is_read_only_and_ordered():
    collector = MetricsCollector()
    sha = BenchmarkCase("SHA-256", 10)
    md5 = BenchmarkCase("MD5", 10)
    report = collector.build_report({
        sha: _make_set(sha, [2.0, 2.2]),
        md5: _make_set(md5, [1.0, 1.2]),
    })
    assert list(report) == [sha, md5]
    assert report.operations == ["SHA-256", "MD5"]
    assert report.sizes == [10]
    assert report.fastest(10).case == md5
    assert report.fastest(999) is None
    with pytest.raises(TypeError):
        report[sha] = None
    rows = report.to_rows()
    assert rows[0]["operation"] == "SHA-256"
    assert rows[1]["successes"] == 2
