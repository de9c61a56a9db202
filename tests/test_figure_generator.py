import os

from hashbench.visualization import FigureGenerator


def test_figures_written(harness, tmp_path):
    harness.configure({"SHA-256", "MD5", "FaultyOp"}, [1, 100], iterations=10, seed=42)
    report = harness.run()

    paths = FigureGenerator(str(tmp_path), dpi=50).generate_all_figures(report)

    assert len(paths) == 4
    for path in paths:
        assert os.path.getsize(path) > 0
    assert os.path.exists(tmp_path / "svg" / "mean_time_by_size.svg")
    assert os.path.exists(tmp_path / "png" / "failure_rate_by_case.png")
