import json

from hashbench.main import main


CONFIG = """
benchmark:
  operations: [SHA-256, MD5]
  sizes: [1, 10]
  iterations: 5
  warmup_runs: 1
random_seed:
  mode: fixed
  fixed_value: 42
output:
  results_file: {results}
"""


def test_main_prints_report_and_saves(write_config, tmp_path, capsys):
    results = tmp_path / "out.json"
    path = write_config(CONFIG.format(results=results))

    assert main([path]) == 0

    out = capsys.readouterr().out
    assert "Benchmark Report" in out
    assert "Fastest operation per input size" in out
    assert out.count("SHA-256") >= 2
    data = json.loads(results.read_text())
    assert set(data) == {"SHA-256", "MD5"}
    assert len(data["MD5"]["10"]) == 5


def test_main_rejects_invalid_config(write_config, capsys):
    path = write_config("benchmark:\n  sizes: []\n")
    assert main([path]) == 2
    assert "Error:" in capsys.readouterr().err


def test_main_missing_file(capsys):
    assert main(["/nonexistent/bench.yaml"]) == 2


def test_main_rejects_negative_seed(write_config, capsys):
    path = write_config("benchmark:\n  sizes: [1]\nrandom_seed:\n  fixed_value: -3\n")
    assert main([path]) == 2
    assert "Seed" in capsys.readouterr().err


def test_main_rejects_negative_seed_argument(write_config):
    path = write_config("benchmark:\n  sizes: [1]\n  iterations: 1\n")
    assert main([path, "-5"]) == 2


def test_main_rejects_empty_benchmark_section(write_config):
    assert main([write_config("benchmark:\n")]) == 2
